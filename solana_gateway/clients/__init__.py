"""Clients for the ledger and cryptography collaborators."""

from solana_gateway.clients.ledger_client import LedgerClient, SolanaLedgerClient

__all__ = ["LedgerClient", "SolanaLedgerClient"]
