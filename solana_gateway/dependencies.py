"""FastAPI dependencies for the Solana gateway.

The application lifespan stores the configuration and the gateway service on
``app.state``; routes receive them through these providers so tests can
swap them with ``app.dependency_overrides``.
"""

from fastapi import Request

from solana_gateway.config import AppConfig
from solana_gateway.services.gateway_service import GatewayService


def get_config(request: Request) -> AppConfig:
    """Dependency to get the application configuration."""
    return request.app.state.config


def get_gateway_service(request: Request) -> GatewayService:
    """Dependency to get the gateway service.

    Args:
        request: The incoming request

    Returns:
        The service created during application startup
    """
    return request.app.state.gateway_service
