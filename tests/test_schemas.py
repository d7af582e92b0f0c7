"""Unit tests for schema variant resolution."""

import pytest

from debitflow.common.errors import MalformedIntentError
from debitflow.services.standalone_credits.schemas import (
    STANDALONE_CREDIT,
    SUB_METHOD_SCHEMAS,
    SchemaVariant,
    resolve,
)


@pytest.mark.parametrize("sub_method", ["ach", "eft", "bacs"])
def test_token_variant_skips_profile(sub_method):
    """A reusable token relaxes profile and billing requirements."""

    variant = resolve(STANDALONE_CREDIT, sub_method, has_token=True)
    assert variant.required == (sub_method, "merchantRefNum", "amount")
    assert variant.optional == ("customerIp", "dupCheck")
    assert variant.nested_required == ()


@pytest.mark.parametrize("sub_method", ["ach", "eft", "bacs"])
def test_no_token_variant_requires_profile(sub_method):
    variant = resolve(STANDALONE_CREDIT, sub_method, has_token=False)
    assert variant.required == (sub_method, "profile", "merchantRefNum", "amount", "billingDetails")
    assert variant.nested_required == (("profile", ("firstName", "lastName")),)


def test_allowlist_is_required_then_optional():
    variant = SchemaVariant(required=("a", "b"), optional=("c",))
    assert variant.allowlist == ("a", "b", "c")


def test_missing_sub_method_is_malformed():
    with pytest.raises(MalformedIntentError) as exc_info:
        resolve(STANDALONE_CREDIT, None, has_token=False)
    assert exc_info.value.message == "One of ach, eft, bacs must be provided"


def test_unknown_operation_is_malformed():
    with pytest.raises(MalformedIntentError):
        resolve("purchase", "ach", has_token=True)


def test_unknown_sub_method_is_malformed():
    with pytest.raises(MalformedIntentError):
        resolve(STANDALONE_CREDIT, "sepa", has_token=True)


def test_registry_is_read_only():
    """Shared tables cannot be changed at runtime."""

    with pytest.raises(TypeError):
        SUB_METHOD_SCHEMAS["sepa"] = SUB_METHOD_SCHEMAS["ach"]
