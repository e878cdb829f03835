"""
Main entry point for the Solana gateway API.

This module initializes the FastAPI application, sets up middleware,
configures routes, and manages the application lifecycle.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from solana_gateway import __version__
from solana_gateway.clients.ledger_client import LedgerClient, SolanaLedgerClient
from solana_gateway.config import AppConfig, get_app_config
from solana_gateway.logging_config import RequestIdMiddleware, configure_logging
from solana_gateway.middleware.error_handler import register_error_handlers
from solana_gateway.routes import accounts, messages, system, tokens, transfers
from solana_gateway.services.gateway_service import GatewayService

logger = logging.getLogger(__name__)

# API Documentation tags
tags_metadata = [
    {
        "name": "accounts",
        "description": "Balances, keypair generation and faucet airdrops",
    },
    {
        "name": "tokens",
        "description": "Unsigned SPL token mint instructions",
    },
    {
        "name": "messages",
        "description": "ed25519 message signing and verification",
    },
    {
        "name": "transfers",
        "description": "Unsigned SOL and SPL token transfer instructions",
    },
    {
        "name": "system",
        "description": "Greeting and health check",
    },
]


def create_application(
    config: Optional[AppConfig] = None,
    ledger_client: Optional[LedgerClient] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Application configuration; read from the environment if omitted
        ledger_client: Ledger client to use instead of one built from config.
            An injected client is not closed on shutdown.

    Returns:
        The configured FastAPI application
    """
    config = config or get_app_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifecycle events.

        Args:
            app: The FastAPI application instance
        """
        configure_logging(config.server.log_level)

        ledger = ledger_client or SolanaLedgerClient(config.solana)
        app.state.ledger_client = ledger
        app.state.gateway_service = GatewayService(ledger, config.solana)

        logger.info(f"Solana gateway v{__version__} started ({config.server.environment})")

        yield  # Application is running here

        logger.info("Application shutting down...")
        if ledger_client is None:
            await ledger.close()
        logger.info("Shutdown complete")

    app = FastAPI(
        title="Solana Gateway API",
        description=(
            "REST gateway for Solana balances, keypairs, SPL token instructions, "
            "message signatures and faucet airdrops."
        ),
        version=__version__,
        openapi_tags=tags_metadata,
        debug=config.server.debug,
        lifespan=lifespan,
    )
    app.state.config = config

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    # Add request logging middleware
    app.add_middleware(RequestIdMiddleware)

    # Register error handlers
    register_error_handlers(app)

    # Register API routers
    api_router = APIRouter(prefix=config.api.api_prefix)
    api_router.include_router(system.router)
    api_router.include_router(accounts.router)
    api_router.include_router(tokens.router)
    api_router.include_router(messages.router)
    api_router.include_router(transfers.router)
    app.include_router(api_router)

    # Serve the built front-end last so API routes take precedence
    static_dir = config.api.static_dir
    if static_dir:
        if os.path.isdir(static_dir):
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning(f"Static directory {static_dir} does not exist; not serving static files")

    return app


def main() -> None:
    """Run the gateway with uvicorn."""
    config = get_app_config()
    uvicorn.run(
        create_application(config),
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level.lower(),
    )


if __name__ == "__main__":
    main()
