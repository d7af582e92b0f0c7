"""Allowlist filtering for standalone credit payloads."""

import copy
from collections.abc import Mapping
from typing import Any

from debitflow.common.wire import Payload
from debitflow.services.standalone_credits.schemas import SchemaVariant


def filter_fields(intent: Mapping[str, Any], allowlist: tuple[str, ...]) -> dict[str, Any]:
    """Copy only allowlisted top-level fields, in allowlist order.

    Fields outside the allowlist are dropped without error. Nested values are
    copied whole, not filtered.
    """

    return {name: copy.deepcopy(intent[name]) for name in allowlist if name in intent}


def serialize(intent: Mapping[str, Any], variant: SchemaVariant) -> Payload:
    return Payload(content=filter_fields(intent, variant.allowlist))
