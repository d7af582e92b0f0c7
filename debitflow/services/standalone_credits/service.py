"""Standalone credit orchestration.

Resolves the schema variant from the intent's shape, validates, serializes
and hands the request to the API client. Validation failures never reach
transport; transport results and errors pass through unchanged.
"""

from collections.abc import Mapping
from typing import Any

from debitflow.common.api_client import ApiClientProtocol
from debitflow.common.config import settings
from debitflow.common.errors import MalformedIntentError, TransportError, ValidationError
from debitflow.common.logging import logger, merchant_ref_num_ctx
from debitflow.common.metrics import (
    standalone_credit_rejections_total,
    standalone_credit_requests_total,
)
from debitflow.common.state_machine import validate_transition
from debitflow.common.tracing import get_tracer
from debitflow.common.wire import Request
from debitflow.services.standalone_credits.intent import PaymentIntent
from debitflow.services.standalone_credits.schemas import STANDALONE_CREDIT, resolve
from debitflow.services.standalone_credits.serialization import serialize
from debitflow.services.standalone_credits.validation import validate


STANDALONE_CREDITS_PATH = "/directdebit/v1/accounts/{account}/standalonecredits"

tracer = get_tracer(__name__)


class DirectDebitService:
    """Builds and dispatches Direct Debit requests through an API client."""

    def __init__(self, client: ApiClientProtocol, validation_error_code: int | None = None) -> None:
        self.client = client
        self.validation_error_code = (
            validation_error_code if validation_error_code is not None else settings.validation_error_code
        )

    def standalone_credits(self, intent: PaymentIntent | Mapping[str, Any]) -> Any:
        """Validate and send one standalone credit; return the client's result."""

        if not isinstance(intent, PaymentIntent):
            intent = PaymentIntent(intent)

        state = "START"
        ref_token = merchant_ref_num_ctx.set(str(intent.get("merchantRefNum") or ""))
        try:
            with tracer.start_as_current_span("standalone_credits") as span:
                try:
                    sub_method = intent.sub_method
                    variant = resolve(STANDALONE_CREDIT, sub_method, intent.has_payment_token)
                except MalformedIntentError as exc:
                    standalone_credit_rejections_total.labels(error_type="MalformedIntentError").inc()
                    logger.warning("standalone credit rejected: %s", exc.message)
                    raise MalformedIntentError(self.validation_error_code, exc.message, exc.details) from exc
                state = self._advance(state, "SCHEMA_RESOLVED")
                span.set_attribute("debitflow.sub_method", sub_method)

                result = validate(intent, variant)
                if not result.valid:
                    self._advance(state, "VALIDATION_FAILED")
                    standalone_credit_rejections_total.labels(error_type="ValidationError").inc()
                    logger.warning("standalone credit rejected: %s", result.message)
                    raise ValidationError(self.validation_error_code, result.message, result.missing)
                state = self._advance(state, "VALIDATED")

                payload = serialize(intent, variant)
                state = self._advance(state, "SERIALIZED")

                request = Request(
                    method="POST",
                    path=STANDALONE_CREDITS_PATH.format(account=self.client.get_account()),
                    body=payload,
                )
                standalone_credit_requests_total.labels(sub_method=sub_method).inc()
                try:
                    response = self.client.process_request(request)
                except TransportError:
                    self._advance(state, "TRANSPORT_FAILED")
                    raise
                self._advance(state, "DISPATCHED")
                logger.info("standalone credit dispatched sub_method=%s path=%s", sub_method, request.path)
                return response
        finally:
            merchant_ref_num_ctx.reset(ref_token)

    @staticmethod
    def _advance(current: str, new: str) -> str:
        validate_transition(current, new)
        return new
