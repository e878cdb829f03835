"""Unit tests for the shared request validators."""

import base64

import base58
import pytest

from solana_gateway.constants import MAX_SAFE_AMOUNT
from solana_gateway.utils.errors import InvalidFormat, InvalidKeyFormat, InvalidRange, MissingField
from solana_gateway.utils.validation import (
    decode_keypair_secret,
    decode_signature,
    encode_message,
    parse_account_field,
    require,
    validate_amount,
    validate_decimals,
)
from tests.fixtures.common import ALICE


class TestRequire:
    """Presence checks."""

    def test_returns_present_value(self):
        assert require("abc", "field") == "abc"
        assert require(0, "amount") == 0

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_values_rejected(self, value):
        with pytest.raises(MissingField) as exc_info:
            require(value, "mintAuthority")
        assert exc_info.value.message == "Missing required field: mintAuthority"
        assert exc_info.value.field == "mintAuthority"
        assert exc_info.value.status_code == 400


class TestParseAccountField:
    """Key parsing with field names."""

    def test_parses_valid_key(self):
        assert parse_account_field(str(ALICE.pubkey()), "owner") == ALICE.pubkey()

    def test_error_names_field(self):
        with pytest.raises(InvalidKeyFormat) as exc_info:
            parse_account_field("invalid-address", "owner")
        assert exc_info.value.field == "owner"
        assert exc_info.value.message.startswith("Invalid owner:")


class TestDecimals:
    """Decimal place bounds."""

    @pytest.mark.parametrize("decimals", [0, 6, 9])
    def test_accepted(self, decimals):
        assert validate_decimals(decimals) == decimals

    @pytest.mark.parametrize("decimals", [-1, 10, 255])
    def test_rejected(self, decimals):
        with pytest.raises(InvalidRange) as exc_info:
            validate_decimals(decimals)
        assert "between 0 and 9" in exc_info.value.message


class TestAmount:
    """Amount bounds."""

    def test_accepted(self):
        assert validate_amount(1, "amount", MAX_SAFE_AMOUNT) == 1
        assert validate_amount(MAX_SAFE_AMOUNT, "amount", MAX_SAFE_AMOUNT) == MAX_SAFE_AMOUNT

    @pytest.mark.parametrize("amount", [0, -5])
    def test_non_positive_rejected(self, amount):
        with pytest.raises(InvalidRange) as exc_info:
            validate_amount(amount, "lamports", MAX_SAFE_AMOUNT)
        assert exc_info.value.message == "lamports must be greater than 0"

    def test_above_maximum_rejected(self):
        with pytest.raises(InvalidRange) as exc_info:
            validate_amount(101, "amount", 100)
        assert "too large" in exc_info.value.message


class TestSignatureDecoding:
    """Base64 signature decoding."""

    def test_valid_signature(self):
        raw = bytes(range(64))
        assert decode_signature(base64.b64encode(raw).decode()) == raw

    def test_not_base64(self):
        with pytest.raises(InvalidFormat) as exc_info:
            decode_signature("not base64!!")
        assert "base64" in exc_info.value.message

    def test_wrong_length(self):
        with pytest.raises(InvalidFormat) as exc_info:
            decode_signature(base64.b64encode(bytes(63)).decode())
        assert "expected 64 bytes, got 63" in exc_info.value.message


class TestSecretDecoding:
    """Base58 keypair secret decoding."""

    def test_valid_secret(self):
        raw = bytes(ALICE)
        assert decode_keypair_secret(base58.b58encode(raw).decode()) == raw

    def test_not_base58(self):
        with pytest.raises(InvalidFormat) as exc_info:
            decode_keypair_secret("0OIl")
        assert "base58" in exc_info.value.message

    def test_wrong_length(self):
        with pytest.raises(InvalidFormat) as exc_info:
            decode_keypair_secret(base58.b58encode(bytes(range(1, 33))).decode())
        assert "expected 64 bytes, got 32" in exc_info.value.message


class TestMessageEncoding:
    """UTF-8 message encoding."""

    def test_encodes_unicode(self):
        assert encode_message("héllo ✓") == "héllo ✓".encode("utf-8")

    def test_lone_surrogate_rejected(self):
        with pytest.raises(InvalidFormat) as exc_info:
            encode_message("\ud800")
        assert exc_info.value.message == "Invalid message: not valid UTF-8"
