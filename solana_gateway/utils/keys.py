"""Account reference parsing.

Public keys arrive either as base58 (the Solana wallet form) or as 64 hex
characters with an optional ``0x`` prefix. Base58 is always tried first, so a
string that is valid base58 is never reinterpreted as hex.
"""

import re

import base58
from solders.pubkey import Pubkey

from solana_gateway.utils.errors import InvalidKeyFormat

PUBKEY_LENGTH = 32
HEX_KEY_LENGTH = PUBKEY_LENGTH * 2

HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")


def parse_account_bytes(value: str) -> bytes:
    """Parse a text-encoded account reference into its 32 raw bytes.

    Args:
        value: base58 string, or 64 hex characters optionally prefixed
            with ``0x``/``0X``

    Returns:
        The 32-byte account reference

    Raises:
        InvalidKeyFormat: If the value is neither valid base58 nor valid hex
    """
    if not isinstance(value, str) or not value:
        raise InvalidKeyFormat(str(value), "value is empty")

    try:
        decoded = base58.b58decode(value)
    except ValueError as e:
        base58_reason = f"invalid base58 ({e})"
    else:
        if len(decoded) == PUBKEY_LENGTH:
            return decoded
        base58_reason = f"base58 decodes to {len(decoded)} bytes, expected {PUBKEY_LENGTH}"

    hex_digits = value[2:] if value[:2] in ("0x", "0X") else value
    if len(hex_digits) != HEX_KEY_LENGTH:
        hex_reason = f"hex form must be {HEX_KEY_LENGTH} characters, got {len(hex_digits)}"
    elif not HEX_PATTERN.fullmatch(hex_digits):
        hex_reason = "hex form contains non-hex characters"
    else:
        return bytes.fromhex(hex_digits)

    raise InvalidKeyFormat(value, f"{base58_reason}; {hex_reason}")


def parse_pubkey(value: str) -> Pubkey:
    """Parse a text-encoded account reference into a ``Pubkey``."""
    return Pubkey.from_bytes(parse_account_bytes(value))


def is_zero_pubkey(pubkey: Pubkey) -> bool:
    """Check whether a public key is the all-zero reference."""
    return bytes(pubkey) == bytes(PUBKEY_LENGTH)
