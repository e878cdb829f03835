"""Token-related API routes.

These routes build unsigned SPL token instructions; nothing is signed or
submitted.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from solana_gateway.dependencies import get_gateway_service
from solana_gateway.models.api_models import ApiResponse
from solana_gateway.models.requests import CreateTokenRequest, MintTokenRequest
from solana_gateway.models.responses import InstructionResponse
from solana_gateway.services.gateway_service import GatewayService

# Create router
router = APIRouter(prefix="/token", tags=["tokens"])


@router.post(
    "/create",
    response_model=ApiResponse[InstructionResponse],
    summary="Build a mint initialization instruction"
)
async def create_token(
    payload: Optional[CreateTokenRequest] = None,
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[InstructionResponse]:
    """Build an InitializeMint instruction for a new SPL token.

    Args:
        payload: Mint authority, mint address and decimals
        service: The gateway service

    Returns:
        The unsigned instruction
    """
    instruction = service.create_token(payload or CreateTokenRequest())
    return ApiResponse.success_response(instruction)


@router.post(
    "/mint",
    response_model=ApiResponse[InstructionResponse],
    summary="Build a mint-to instruction"
)
async def mint_token(
    payload: Optional[MintTokenRequest] = None,
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[InstructionResponse]:
    instruction = service.mint_token(payload or MintTokenRequest())
    return ApiResponse.success_response(instruction)
