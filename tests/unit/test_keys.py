"""Unit tests for account reference parsing."""

import base58
import pytest
from solders.pubkey import Pubkey

from solana_gateway.utils.errors import InvalidFormat, InvalidKeyFormat
from solana_gateway.utils.keys import is_zero_pubkey, parse_account_bytes, parse_pubkey
from tests.fixtures.common import ALICE, ZERO_ADDRESS


@pytest.mark.parametrize("raw", [bytes(32), bytes(range(32)), b"\xff" * 32, bytes(ALICE.pubkey())])
def test_base58_round_trip(raw):
    """Any 32 bytes survive a base58 encode and parse."""
    encoded = base58.b58encode(raw).decode("ascii")
    assert parse_account_bytes(encoded) == raw


@pytest.mark.parametrize("prefix", ["", "0x", "0X"])
def test_hex_round_trip(prefix):
    raw = bytes(range(100, 132))
    assert parse_account_bytes(prefix + raw.hex()) == raw


def test_hex_is_case_insensitive():
    raw = bytes(range(200, 232))
    assert parse_account_bytes(raw.hex().upper()) == raw


def test_hex_and_base58_forms_agree():
    """Both encodings of the same key parse to the same Pubkey."""
    pubkey = ALICE.pubkey()
    assert parse_pubkey(str(pubkey)) == pubkey
    assert parse_pubkey("0x" + bytes(pubkey).hex()) == pubkey


def test_base58_is_tried_before_hex():
    """A string of hex digits that is valid base58 is read as base58."""
    value = "1" * 32
    assert parse_account_bytes(value) == bytes(32)


def test_zero_address_parses():
    assert parse_account_bytes(ZERO_ADDRESS) == bytes(32)


@pytest.mark.parametrize("length", [63, 65])
def test_hex_with_wrong_length_rejected(length):
    value = "0" * length
    with pytest.raises(InvalidKeyFormat) as exc_info:
        parse_account_bytes(value)
    assert "64 characters" in exc_info.value.reason


def test_hex_with_non_hex_characters_rejected():
    value = "0" * 63 + "g"
    with pytest.raises(InvalidKeyFormat) as exc_info:
        parse_account_bytes(value)
    assert "non-hex characters" in exc_info.value.reason


def test_invalid_base58_rejected():
    with pytest.raises(InvalidKeyFormat) as exc_info:
        parse_account_bytes("invalid-address")
    assert "invalid base58" in exc_info.value.reason
    assert exc_info.value.status_code == 400


def test_short_base58_rejected():
    """Valid base58 that does not decode to 32 bytes is not a key."""
    with pytest.raises(InvalidKeyFormat) as exc_info:
        parse_account_bytes("abc")
    assert "expected 32" in exc_info.value.reason


def test_empty_value_rejected():
    with pytest.raises(InvalidKeyFormat):
        parse_account_bytes("")


def test_key_errors_are_format_errors():
    """Key parsing failures are reported as format errors."""
    with pytest.raises(InvalidFormat) as exc_info:
        parse_pubkey("not a key")
    assert exc_info.value.message.startswith("Invalid public key:")


def test_parse_pubkey_returns_pubkey():
    pubkey = parse_pubkey(str(ALICE.pubkey()))
    assert isinstance(pubkey, Pubkey)
    assert pubkey == ALICE.pubkey()


def test_is_zero_pubkey():
    assert is_zero_pubkey(Pubkey.default())
    assert is_zero_pubkey(parse_pubkey(ZERO_ADDRESS))
    assert not is_zero_pubkey(ALICE.pubkey())
