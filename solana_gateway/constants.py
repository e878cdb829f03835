"""Constants used throughout the Solana gateway.

This module defines common constants to avoid duplication and ensure consistency.
"""

# Solana program IDs
SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

# Native currency
LAMPORTS_PER_SOL = 1_000_000_000

# Largest value an on-chain u64 amount can hold
U64_MAX = 2**64 - 1

# Overflow-safety margin for transfer amounts. Heuristic, not a protocol limit.
MAX_SAFE_AMOUNT = U64_MAX // 2

# Absolute ceiling on a single native transfer (one billion SOL)
MAX_TRANSFER_LAMPORTS = 1_000_000_000 * LAMPORTS_PER_SOL

# SPL token mints support at most 9 decimal places
MAX_DECIMALS = 9
DEFAULT_DECIMALS = 9

# ed25519 signature and keypair sizes
SIGNATURE_LENGTH = 64
KEYPAIR_LENGTH = 64

# Static greeting returned by /hello
HELLO_MESSAGE = "Hello from the Solana gateway!"
