"""Utility helpers for the Solana gateway."""
