#!/usr/bin/env python
"""
Solana Gateway
Main entry point for the application
"""
import uvicorn

from solana_gateway.app import create_application
from solana_gateway.config import get_app_config

config = get_app_config()

# Initialize FastAPI app
app = create_application(config)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level.lower(),
        reload=config.server.debug
    )
