"""Message signing API routes."""

from typing import Optional

from fastapi import APIRouter, Depends

from solana_gateway.dependencies import get_gateway_service
from solana_gateway.models.api_models import ApiResponse
from solana_gateway.models.requests import SignMessageRequest, VerifyMessageRequest
from solana_gateway.models.responses import SignMessageResponse, VerifyMessageResponse
from solana_gateway.services.gateway_service import GatewayService

# Create router
router = APIRouter(prefix="/message", tags=["messages"])


@router.post(
    "/sign",
    response_model=ApiResponse[SignMessageResponse],
    summary="Sign a message",
    description="Signs a UTF-8 message with an ed25519 keypair supplied by the caller."
)
async def sign_message(
    payload: Optional[SignMessageRequest] = None,
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[SignMessageResponse]:
    result = service.sign_message(payload or SignMessageRequest())
    return ApiResponse.success_response(result)


@router.post(
    "/verify",
    response_model=ApiResponse[VerifyMessageResponse],
    summary="Verify a signed message"
)
async def verify_message(
    payload: Optional[VerifyMessageRequest] = None,
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[VerifyMessageResponse]:
    """Check a base64 signature against a message and public key.

    An invalid but well-formed signature is a successful response with
    ``valid`` set to false.
    """
    result = service.verify_message(payload or VerifyMessageRequest())
    return ApiResponse.success_response(result)
