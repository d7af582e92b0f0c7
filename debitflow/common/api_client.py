"""HTTP transport for Direct Debit API calls.

The request layer only needs `get_account` and `process_request`; any object
offering both can stand in for `ApiClient` (see `ApiClientProtocol`).
"""

from time import perf_counter
from typing import Any, Protocol

import httpx

from debitflow.common.config import settings
from debitflow.common.errors import TransportError
from debitflow.common.logging import logger, trace_id_ctx
from debitflow.common.metrics import transport_failures_total, transport_latency_seconds
from debitflow.common.wire import Request


class ApiClientProtocol(Protocol):
    def get_account(self) -> str: ...

    def process_request(self, request: Request) -> Any: ...


class ApiClient:
    """Synchronous API client authenticating with the configured key pair."""

    def __init__(
        self,
        base_url: str | None = None,
        key_id: str | None = None,
        key_secret: str | None = None,
        account_number: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.account_number = account_number if account_number is not None else settings.account_number
        self._http = http_client or httpx.Client(
            base_url=base_url or settings.api_base_url,
            auth=(
                key_id if key_id is not None else settings.api_key_id,
                key_secret if key_secret is not None else settings.api_key_secret,
            ),
            timeout=timeout if timeout is not None else settings.request_timeout_seconds,
        )

    def get_account(self) -> str:
        return self.account_number

    def process_request(self, request: Request) -> Any:
        """Send one request and return the decoded JSON response.

        Raises `TransportError` on connection problems and HTTP >= 400.
        """

        headers = {"Content-Type": "application/json"}
        trace_id = trace_id_ctx.get()
        if trace_id:
            headers["x-trace-id"] = trace_id
        content = request.body.to_json() if request.body is not None else None

        try:
            with transport_latency_seconds.labels(method=request.method).time():
                resp = self._http.request(request.method, request.path, content=content, headers=headers)
        except httpx.HTTPError as exc:
            transport_failures_total.labels(status_code="0").inc()
            logger.error("api request failed method=%s path=%s error=%s", request.method, request.path, exc)
            raise TransportError(0, str(exc), {"path": request.path}) from exc

        if resp.status_code >= 400:
            transport_failures_total.labels(status_code=str(resp.status_code)).inc()
            logger.error("api rejected request path=%s status=%s", request.path, resp.status_code)
            raise TransportError(resp.status_code, resp.text, {"path": request.path})
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            transport_failures_total.labels(status_code=str(resp.status_code)).inc()
            logger.error("api returned invalid JSON path=%s status=%s", request.path, resp.status_code)
            raise TransportError(resp.status_code, "invalid JSON response", {"path": request.path}) from exc

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
