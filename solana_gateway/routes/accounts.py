"""Account-related API routes.

This module defines routes for balances, keypair generation and faucet
airdrops.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from solana_gateway.dependencies import get_gateway_service
from solana_gateway.models.api_models import ApiResponse
from solana_gateway.models.requests import BalanceRequest
from solana_gateway.models.responses import AirdropResponse, BalanceResponse, KeypairResponse
from solana_gateway.services.gateway_service import GatewayService

# Create router
router = APIRouter(tags=["accounts"])


@router.get(
    "/balance",
    response_model=ApiResponse[BalanceResponse],
    summary="Get account balance",
    description="Retrieves the balance of a Solana account in lamports and SOL."
)
async def get_balance(
    public_key: Optional[str] = Query(None, description="Account address (base58 or hex)"),
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[BalanceResponse]:
    """Get the balance of a Solana account.

    Args:
        public_key: The account address
        service: The gateway service

    Returns:
        Account balance information
    """
    balance = await service.get_balance(public_key)
    return ApiResponse.success_response(balance)


@router.post(
    "/balance",
    response_model=ApiResponse[BalanceResponse],
    summary="Get account balance",
    description="Same as GET /balance with the address in a JSON body."
)
async def post_balance(
    payload: Optional[BalanceRequest] = None,
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[BalanceResponse]:
    payload = payload or BalanceRequest()
    balance = await service.get_balance(payload.public_key)
    return ApiResponse.success_response(balance)


@router.get(
    "/airdrop",
    response_model=ApiResponse[AirdropResponse],
    summary="Request a faucet airdrop",
    description="Generates a fresh keypair and asks the network faucet to fund it."
)
async def airdrop(
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[AirdropResponse]:
    result = await service.airdrop()
    return ApiResponse.success_response(result)


@router.post(
    "/keypair",
    response_model=ApiResponse[KeypairResponse],
    summary="Generate a keypair",
    description="Returns a new public key and its base58-encoded 64-byte secret."
)
async def generate_keypair(
    service: GatewayService = Depends(get_gateway_service)
) -> ApiResponse[KeypairResponse]:
    return ApiResponse.success_response(service.generate_keypair())
