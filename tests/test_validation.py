"""
Tests for shared validation, error and credential helpers.
"""
import bson
import pytest

from sports_buddy.utils.errors import (
    AuthError,
    ConflictError,
    NotFoundError,
    SportsBuddyError,
    StoreError,
    ValidationError,
)
from sports_buddy.utils.security_utils import PlaintextCredentialVerifier
from sports_buddy.utils.validation import is_valid_email, parse_mobile, password_length, require_fields


@pytest.mark.parametrize("email", ["a@b.co", "first.last@sub.example.org", "x+tag@y.io"])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.de", "@b.co", "a@@b.co", "a@b.co\n", ""])
def test_invalid_emails(email):
    assert not is_valid_email(email)


def test_parse_mobile_leading_integer():
    assert parse_mobile("9876543210") == 9876543210
    assert parse_mobile("98765 43210") == 98765
    assert parse_mobile(" +91") == 91
    assert parse_mobile(42) == 42
    assert parse_mobile(12.7) == 12


def test_parse_mobile_absent_or_unparseable_is_none():
    assert parse_mobile(None) is None
    assert parse_mobile("") is None
    assert parse_mobile(0) is None
    assert parse_mobile("call me") is None


def test_require_fields_treats_empty_as_missing():
    require_fields("missing", "a", "b")

    with pytest.raises(ValidationError) as exc_info:
        require_fields("missing", "a", "")
    assert exc_info.value.message == "missing"

    with pytest.raises(ValidationError):
        require_fields("missing", None, "b")


@pytest.mark.parametrize(
    "error_class, status",
    [
        (ValidationError, 400),
        (ConflictError, 400),
        (AuthError, 401),
        (NotFoundError, 404),
        (StoreError, 500),
    ],
)
def test_error_status_and_body(error_class, status):
    error = error_class("something happened")
    assert isinstance(error, SportsBuddyError)
    assert error.http_status == status
    assert error.to_response() == {"success": False, "message": "something happened"}


def test_plaintext_verifier():
    verifier = PlaintextCredentialVerifier()
    stored = verifier.prepare("secret")

    assert stored == "secret"
    assert verifier.verify("secret", stored)
    assert not verifier.verify("Secret", stored)
    assert not verifier.verify("secret", None)


def test_parse_mobile_outside_int64_becomes_float():
    assert parse_mobile(str(2**63 - 1)) == 2**63 - 1
    assert isinstance(parse_mobile(str(2**63 - 1)), int)

    stored = parse_mobile("99999999999999999999")
    assert isinstance(stored, float)
    assert stored == 1e20
    assert parse_mobile(-(2**64)) == float(-(2**64))
    assert parse_mobile(1e30) == 1e30


def test_parsed_mobile_is_bson_encodable():
    for raw in ("99999999999999999999", "9876543210", 2**70, 1e30, float("inf")):
        bson.encode({"mobile": parse_mobile(raw)})


def test_parse_mobile_non_finite_float_is_none():
    assert parse_mobile(float("inf")) is None
    assert parse_mobile(float("nan")) is None


def test_password_length_counts_utf16_units():
    assert password_length("secret") == 6
    assert password_length("\U0001F600" * 3) == 6
    assert password_length("é") == 1
