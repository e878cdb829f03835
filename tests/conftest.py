"""Test configuration for pytest.

This module imports fixtures that should be available to all tests.
"""

# Import fixtures
from tests.fixtures.common import (  # noqa
    solana_config,
    app_config,
    mock_rpc,
    ledger_client,
    gateway_service,
    app,
    client,
    alice,
    bob,
    mint_keypair,
)
