"""Required/optional field tables per operation and sub-method.

Tables are built at import time and exposed through read-only mappings.
`resolve` is the only entry point; it picks the variant from two facts about
the intent: which sub-method was populated and whether it carries a token.
"""

from dataclasses import dataclass
from types import MappingProxyType

from debitflow.common.config import settings
from debitflow.common.errors import MalformedIntentError


STANDALONE_CREDIT = "standalone_credit"


@dataclass(frozen=True)
class SchemaVariant:
    """Field lists governing validation and serialization of one request."""

    required: tuple[str, ...]
    optional: tuple[str, ...] = ()
    # (field, subfields) pairs checked before the top-level required list.
    nested_required: tuple[tuple[str, tuple[str, ...]], ...] = ()

    @property
    def allowlist(self) -> tuple[str, ...]:
        return self.required + self.optional


@dataclass(frozen=True)
class SubMethodSchema:
    """How one payment rail shapes the standalone credit request."""

    key: str
    token_field: str = "paymentToken"
    with_token: tuple[str, ...] = ("merchantRefNum", "amount")
    without_token: tuple[str, ...] = ("profile", "merchantRefNum", "amount", "billingDetails")
    optional: tuple[str, ...] = ("customerIp", "dupCheck")
    profile_required: tuple[str, ...] = ("firstName", "lastName")


SUB_METHOD_SCHEMAS = MappingProxyType(
    {
        "ach": SubMethodSchema(key="ach"),
        "eft": SubMethodSchema(key="eft"),
        "bacs": SubMethodSchema(key="bacs"),
    }
)

OPERATION_SCHEMAS = MappingProxyType({STANDALONE_CREDIT: SUB_METHOD_SCHEMAS})


def _bad_intent(message: str, **details) -> MalformedIntentError:
    return MalformedIntentError(settings.validation_error_code, message, details)


def resolve(operation_kind: str, sub_method: str | None, has_token: bool) -> SchemaVariant:
    """Return the schema variant for an operation given the intent's shape.

    `sub_method=None` means the caller selected no payment rail, which no
    variant can describe.
    """

    rails = OPERATION_SCHEMAS.get(operation_kind)
    if rails is None:
        raise _bad_intent(f"Unknown operation: {operation_kind}", operation=operation_kind)
    if sub_method is None:
        raise _bad_intent(
            f"One of {', '.join(rails)} must be provided",
            operation=operation_kind,
        )
    rail = rails.get(sub_method)
    if rail is None:
        raise _bad_intent(f"Unknown sub-method: {sub_method}", sub_method=sub_method)

    if has_token:
        return SchemaVariant(required=(rail.key,) + rail.with_token, optional=rail.optional)
    return SchemaVariant(
        required=(rail.key,) + rail.without_token,
        optional=rail.optional,
        nested_required=(("profile", rail.profile_required),),
    )
