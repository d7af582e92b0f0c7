"""Required-property checks run before any request is serialized."""

from collections.abc import Mapping
from dataclasses import dataclass

from debitflow.services.standalone_credits.intent import PaymentIntent
from debitflow.services.standalone_credits.schemas import SchemaVariant


def missing_properties_message(names) -> str:
    return "Missing required properties: " + ", ".join(names)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of `validate`; `missing` is empty when the intent is valid."""

    missing: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.missing

    @property
    def message(self) -> str:
        return missing_properties_message(self.missing)


def _missing(container: Mapping, names: tuple[str, ...]) -> tuple[str, ...]:
    # Presence is key existence; empty values still count.
    seen: list[str] = []
    for name in names:
        if name not in container and name not in seen:
            seen.append(name)
    return tuple(seen)


def validate(intent: PaymentIntent, variant: SchemaVariant) -> ValidationResult:
    """Check nested requirements first, then the top-level required list.

    A gap in a nested object is reported on its own: top-level fields are
    not evaluated in the same pass.
    """

    for field, subfields in variant.nested_required:
        nested = intent.get(field)
        if not isinstance(nested, Mapping):
            nested = {}
        missing = _missing(nested, subfields)
        if missing:
            return ValidationResult(missing)

    return ValidationResult(_missing(intent, variant.required))
