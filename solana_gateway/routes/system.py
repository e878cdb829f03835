"""System API routes: greeting and health check."""

from fastapi import APIRouter, Depends

from solana_gateway import __version__
from solana_gateway.config import AppConfig
from solana_gateway.dependencies import get_config, get_gateway_service
from solana_gateway.models.api_models import ApiResponse
from solana_gateway.models.responses import HealthResponse, HelloResponse
from solana_gateway.services.gateway_service import GatewayService

# Create router
router = APIRouter(tags=["system"])


@router.get(
    "/hello",
    response_model=ApiResponse[HelloResponse],
    summary="Greeting",
    description="Returns a static greeting."
)
async def hello(
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[HelloResponse]:
    return ApiResponse.success_response(service.hello())


@router.get(
    "/health",
    response_model=ApiResponse[HealthResponse],
    summary="Health check"
)
async def health_check(
    config: AppConfig = Depends(get_config)
) -> ApiResponse[HealthResponse]:
    """
    Check the health of the service.

    Returns the service status, version, and environment. This endpoint can
    be used for monitoring and health checks.
    """
    return ApiResponse.success_response(
        HealthResponse(
            status="healthy",
            version=__version__,
            environment=config.server.environment,
        )
    )
