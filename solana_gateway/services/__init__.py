"""Services implementing the gateway operations."""

from solana_gateway.services.gateway_service import GatewayService

__all__ = ["GatewayService"]
