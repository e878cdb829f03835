"""API routers for the Solana gateway."""

from solana_gateway.routes import accounts, messages, system, tokens, transfers

__all__ = ["accounts", "messages", "system", "tokens", "transfers"]
