"""Common test fixtures for the Solana gateway.

This module contains fixtures that can be reused across different test files.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient
from solders.keypair import Keypair
from solders.signature import Signature

from solana_gateway.app import create_application
from solana_gateway.clients.ledger_client import SolanaLedgerClient
from solana_gateway.config import APIConfig, AppConfig, ServerConfig, SolanaConfig
from solana_gateway.services.gateway_service import GatewayService

# Deterministic keypairs so failures are reproducible
ALICE = Keypair.from_seed(bytes([1] * 32))
BOB = Keypair.from_seed(bytes([2] * 32))
MINT = Keypair.from_seed(bytes([3] * 32))

ZERO_ADDRESS = "11111111111111111111111111111111"

SAMPLE_BALANCE = 1_500_000_000
SAMPLE_SIGNATURE = Signature.from_bytes(bytes(range(64)))


@pytest.fixture
def solana_config():
    """Solana settings pointing at a local node that is never contacted."""
    return SolanaConfig(
        rpc_url="http://localhost:8899",
        commitment="confirmed",
        timeout=1.0,
        airdrop_lamports=2_000_000_000,
    )


@pytest.fixture
def app_config(solana_config):
    """Create a test application configuration."""
    return AppConfig(
        solana=solana_config,
        server=ServerConfig(environment="testing"),
        api=APIConfig(),
    )


@pytest.fixture
def mock_rpc():
    """Create a mock Solana RPC client."""
    rpc = AsyncMock()
    rpc.get_balance.return_value = MagicMock(value=SAMPLE_BALANCE)
    rpc.request_airdrop.return_value = MagicMock(value=SAMPLE_SIGNATURE)
    return rpc


@pytest.fixture
def ledger_client(solana_config, mock_rpc):
    """Create a ledger client that uses the real SDK with a mock RPC node."""
    return SolanaLedgerClient(solana_config, rpc=mock_rpc)


@pytest.fixture
def gateway_service(ledger_client, solana_config):
    """Create a gateway service over the test ledger client."""
    return GatewayService(ledger_client, solana_config)


@pytest.fixture
def app(app_config, ledger_client):
    """Create the FastAPI application with the test ledger client injected."""
    return create_application(app_config, ledger_client)


@pytest.fixture
def client(app):
    """Create a test client; entering it runs the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def alice():
    return ALICE


@pytest.fixture
def bob():
    return BOB


@pytest.fixture
def mint_keypair():
    return MINT
