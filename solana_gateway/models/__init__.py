"""Pydantic models for requests, responses and the response envelope."""

from solana_gateway.models.api_models import ApiResponse

__all__ = ["ApiResponse"]
