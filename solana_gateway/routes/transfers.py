"""Transfer API routes.

These routes build unsigned transfer instructions for native SOL and SPL
tokens.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from solana_gateway.dependencies import get_gateway_service
from solana_gateway.models.api_models import ApiResponse
from solana_gateway.models.requests import SendSolRequest, SendTokenRequest
from solana_gateway.models.responses import InstructionResponse
from solana_gateway.services.gateway_service import GatewayService

# Create router
router = APIRouter(prefix="/send", tags=["transfers"])


@router.post(
    "/sol",
    response_model=ApiResponse[InstructionResponse],
    summary="Build a SOL transfer instruction"
)
async def send_sol(
    payload: Optional[SendSolRequest] = None,
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[InstructionResponse]:
    """Build a System Program transfer.

    Args:
        payload: Sender, recipient and lamports
        service: The gateway service

    Returns:
        The unsigned instruction
    """
    instruction = service.send_sol(payload or SendSolRequest())
    return ApiResponse.success_response(instruction)


@router.post(
    "/token",
    response_model=ApiResponse[InstructionResponse],
    summary="Build an SPL token transfer instruction",
    description=(
        "Transfers between the associated token accounts of the owner and the "
        "destination for the given mint."
    )
)
async def send_token(
    payload: Optional[SendTokenRequest] = None,
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[InstructionResponse]:
    instruction = service.send_token(payload or SendTokenRequest())
    return ApiResponse.success_response(instruction)
