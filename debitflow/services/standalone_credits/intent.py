"""Caller-supplied standalone credit intent."""

import copy
from collections.abc import Iterator, Mapping
from typing import Any

from debitflow.common.config import settings
from debitflow.common.errors import MalformedIntentError


# Precedence when a caller populates more than one sub-method.
SUB_METHOD_KEYS: tuple[str, ...] = ("ach", "eft", "bacs")
PAYMENT_TOKEN_FIELD = "paymentToken"


class PaymentIntent(Mapping):
    """Read-only mapping of request fields built once from caller input.

    The input is deep-copied so later mutation by the caller never reaches
    the intent. Unset fields read as `None` through `get`.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(dict(data or {}))

    def __getitem__(self, name: str) -> Any:
        return self._data[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PaymentIntent({self._data!r})"

    @property
    def sub_method(self) -> str | None:
        """First populated sub-method key, or None when the caller chose none."""

        for key in SUB_METHOD_KEYS:
            if key in self._data:
                if not isinstance(self._data[key], Mapping):
                    raise MalformedIntentError(
                        settings.validation_error_code,
                        f"Sub-method '{key}' must be an object",
                        {"sub_method": key},
                    )
                return key
        return None

    @property
    def has_sub_method(self) -> bool:
        return self.sub_method is not None

    @property
    def has_payment_token(self) -> bool:
        """True when the selected sub-method carries a reusable payment token."""

        key = self.sub_method
        if key is None:
            return False
        return self._data[key].get(PAYMENT_TOKEN_FIELD) is not None

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)
