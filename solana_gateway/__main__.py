"""Command-line entry point for the Solana gateway."""

from solana_gateway.app import main

if __name__ == "__main__":
    main()
