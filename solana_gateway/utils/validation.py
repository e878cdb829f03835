"""Validation utilities for the Solana gateway.

This module provides the presence, format and range checks shared by the
endpoint handlers. Each check raises the matching ``GatewayError`` subclass.
"""

import base64
import binascii
from typing import Callable, Optional, TypeVar

import base58
from solders.pubkey import Pubkey

from solana_gateway.constants import KEYPAIR_LENGTH, MAX_DECIMALS, SIGNATURE_LENGTH
from solana_gateway.utils.errors import (
    InvalidFormat,
    InvalidKeyFormat,
    InvalidRange,
    MissingField,
)
from solana_gateway.utils.keys import parse_pubkey

T = TypeVar("T")


def require(value: Optional[T], field: str) -> T:
    """Return ``value`` or raise ``MissingField`` if it is absent.

    Empty strings count as absent.
    """
    if value is None or (isinstance(value, str) and value == ""):
        raise MissingField(field)
    return value


def parse_account_field(
    value: str,
    field: str,
    parser: Callable[[str], Pubkey] = parse_pubkey
) -> Pubkey:
    """Parse an account reference, naming the offending field on failure."""
    try:
        return parser(value)
    except InvalidKeyFormat as e:
        raise InvalidKeyFormat(value, e.reason, field=field) from e


def validate_decimals(decimals: int, field: str = "decimals") -> int:
    """Validate SPL token decimal places.

    Args:
        decimals: Requested decimal places
        field: Wire name used in the error message

    Returns:
        The validated value

    Raises:
        InvalidRange: If decimals is negative or above ``MAX_DECIMALS``
    """
    if decimals < 0 or decimals > MAX_DECIMALS:
        raise InvalidRange(
            f"{field} must be between 0 and {MAX_DECIMALS}, got {decimals}",
            details={"field": field, "value": decimals}
        )
    return decimals


def validate_amount(amount: int, field: str, maximum: int) -> int:
    """Validate that an amount is strictly positive and at most ``maximum``.

    Raises:
        InvalidRange: If the amount is zero, negative or too large
    """
    if amount <= 0:
        raise InvalidRange(
            f"{field} must be greater than 0",
            details={"field": field, "value": amount}
        )
    if amount > maximum:
        raise InvalidRange(
            f"{field} is too large (maximum {maximum})",
            details={"field": field, "value": amount, "maximum": maximum}
        )
    return amount


def decode_signature(value: str, field: str = "signature") -> bytes:
    """Decode a base64 signature and check its length."""
    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidFormat(
            f"Invalid {field}: not valid base64",
            details={"field": field}
        )
    if len(raw) != SIGNATURE_LENGTH:
        raise InvalidFormat(
            f"Invalid {field}: expected {SIGNATURE_LENGTH} bytes, got {len(raw)}",
            details={"field": field, "length": len(raw)}
        )
    return raw


def decode_keypair_secret(value: str, field: str = "secret") -> bytes:
    """Decode a base58 keypair secret (64 bytes: seed then public key)."""
    try:
        raw = base58.b58decode(value)
    except ValueError:
        raise InvalidFormat(
            f"Invalid {field}: not valid base58",
            details={"field": field}
        )
    if len(raw) != KEYPAIR_LENGTH:
        raise InvalidFormat(
            f"Invalid {field}: expected {KEYPAIR_LENGTH} bytes, got {len(raw)}",
            details={"field": field, "length": len(raw)}
        )
    return raw


def encode_message(value: str, field: str = "message") -> bytes:
    """Encode a message as UTF-8, rejecting unpaired surrogates."""
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidFormat(
            f"Invalid {field}: not valid UTF-8",
            details={"field": field}
        )
