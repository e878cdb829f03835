"""Solana Gateway Package.

This package exposes Solana operations (balances, keypairs, SPL-token
instructions, message signing and faucet airdrops) over a JSON REST API.
"""

__version__ = "0.1.0"
__author__ = "Solana Gateway Contributors"
__email__ = "dev@example.com"
