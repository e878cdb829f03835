"""Ledger client for the Solana gateway.

``LedgerClient`` is the narrow surface the handlers depend on: key parsing,
the two remote calls (balance and airdrop), instruction builders and
message signatures. ``SolanaLedgerClient`` implements it with ``solana-py``,
``solders`` and ``spl.token``; tests substitute mocks for the RPC side.
"""

# Standard library imports
import asyncio
from abc import ABC, abstractmethod
from typing import Optional, Tuple

# Third-party library imports
import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import RPCException
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.system_program import TransferParams as SystemTransferParams
from solders.system_program import transfer as system_transfer
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import (
    get_associated_token_address,
    initialize_mint,
    mint_to_checked,
    transfer,
    transfer_checked,
)
from spl.token.models import (
    InitializeMintParams,
    MintToCheckedParams,
    TransferCheckedParams,
    TransferParams,
)

# Internal imports
from solana_gateway.config import SolanaConfig
from solana_gateway.constants import KEYPAIR_LENGTH
from solana_gateway.logging_config import get_logger
from solana_gateway.utils.errors import CollaboratorFailure, FaucetFailure, InvalidFormat
from solana_gateway.utils.keys import parse_pubkey

# Get logger
logger = get_logger(__name__)

# Errors the RPC transport can surface
RPC_ERRORS = (SolanaRpcException, RPCException, httpx.HTTPError)


def describe_rpc_error(error: Exception) -> str:
    """Render an RPC transport error as a one-line reason."""
    # SolanaRpcException keeps its text in error_msg rather than args
    return getattr(error, "error_msg", None) or str(error) or type(error).__name__


class LedgerClient(ABC):
    """Operations the gateway delegates to the Solana SDK and RPC node."""

    def parse_key(self, value: str) -> Pubkey:
        """Parse a base58 or hex account reference."""
        return parse_pubkey(value)

    @abstractmethod
    async def get_balance(self, pubkey: Pubkey) -> int:
        """Return the balance of an account in lamports."""

    @abstractmethod
    async def request_airdrop(self, pubkey: Pubkey, lamports: int) -> str:
        """Ask the faucet to fund an account and return the transaction signature."""

    @abstractmethod
    def generate_keypair(self) -> Keypair:
        """Generate a fresh keypair."""

    @abstractmethod
    def associated_token_address(self, owner: Pubkey, mint: Pubkey) -> Pubkey:
        """Derive the associated token account of ``owner`` for ``mint``."""

    @abstractmethod
    def build_initialize_mint(self, mint: Pubkey, mint_authority: Pubkey, decimals: int) -> Instruction:
        """Build an InitializeMint instruction."""

    @abstractmethod
    def build_mint_to(
        self,
        mint: Pubkey,
        destination: Pubkey,
        mint_authority: Pubkey,
        amount: int,
        decimals: int
    ) -> Instruction:
        """Build a MintToChecked instruction."""

    @abstractmethod
    def build_sol_transfer(self, from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int) -> Instruction:
        """Build a System Program transfer instruction."""

    @abstractmethod
    def build_token_transfer(
        self,
        source: Pubkey,
        destination: Pubkey,
        owner: Pubkey,
        mint: Pubkey,
        amount: int,
        decimals: Optional[int] = None
    ) -> Instruction:
        """Build an SPL token transfer between two token accounts."""

    @abstractmethod
    def sign_message(self, secret: bytes, message: bytes) -> Tuple[bytes, Pubkey]:
        """Sign ``message`` with a 64-byte keypair, returning signature and signer."""

    @abstractmethod
    def verify_message(self, pubkey: Pubkey, signature: bytes, message: bytes) -> bool:
        """Check an ed25519 signature over ``message``."""

    async def close(self) -> None:
        """Release any network resources."""


class SolanaLedgerClient(LedgerClient):
    """Ledger client backed by a Solana RPC node and the Solana SDK."""

    def __init__(self, config: SolanaConfig, rpc: Optional[AsyncClient] = None):
        """Initialize the ledger client.

        Args:
            config: Solana configuration (RPC URL, commitment, timeout)
            rpc: Optional pre-built RPC client, mainly for tests
        """
        self.config = config
        if rpc is None:
            # Log the endpoint (without API key)
            sanitized_endpoint = config.rpc_url.split("?")[0]
            logger.info(f"Initializing Solana RPC client with endpoint: {sanitized_endpoint}")
            rpc = AsyncClient(config.rpc_url, commitment=config.commitment, timeout=config.timeout)
        self.rpc = rpc

    async def __aenter__(self):
        """Async context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit with cleanup"""
        await self.close()

    async def close(self) -> None:
        """Close the RPC client and release resources"""
        await self.rpc.close()
        logger.debug("Closed Solana RPC client")

    async def get_balance(self, pubkey: Pubkey) -> int:
        """Get the lamport balance of an account.

        Raises:
            CollaboratorFailure: If the RPC call fails or times out
        """
        try:
            response = await asyncio.wait_for(self.rpc.get_balance(pubkey), timeout=self.config.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Balance lookup for {pubkey} timed out after {self.config.timeout}s")
            raise CollaboratorFailure("Balance lookup timed out")
        except RPC_ERRORS as e:
            reason = describe_rpc_error(e)
            logger.error(f"Balance lookup for {pubkey} failed: {reason}")
            raise CollaboratorFailure("Failed to fetch balance", details={"error": reason})

        value = getattr(response, "value", None)
        if value is None:
            raise CollaboratorFailure("RPC node returned no balance")
        return value

    async def request_airdrop(self, pubkey: Pubkey, lamports: int) -> str:
        """Request faucet funds for an account.

        Raises:
            FaucetFailure: If the faucet refuses, fails or times out
        """
        try:
            response = await asyncio.wait_for(
                self.rpc.request_airdrop(pubkey, lamports),
                timeout=self.config.timeout
            )
        except asyncio.TimeoutError:
            logger.warning(f"Airdrop to {pubkey} timed out after {self.config.timeout}s")
            raise FaucetFailure("Airdrop request timed out")
        except RPC_ERRORS as e:
            reason = describe_rpc_error(e)
            logger.error(f"Airdrop to {pubkey} failed: {reason}")
            raise FaucetFailure(f"Airdrop failed: {reason}", details={"error": reason})

        signature = getattr(response, "value", None)
        if signature is None:
            raise FaucetFailure("Faucet returned no transaction signature")
        return str(signature)

    def generate_keypair(self) -> Keypair:
        return Keypair()

    def associated_token_address(self, owner: Pubkey, mint: Pubkey) -> Pubkey:
        return get_associated_token_address(owner, mint)

    def build_initialize_mint(self, mint: Pubkey, mint_authority: Pubkey, decimals: int) -> Instruction:
        params = InitializeMintParams(
            decimals=decimals,
            program_id=TOKEN_PROGRAM_ID,
            mint=mint,
            mint_authority=mint_authority,
            freeze_authority=None,
        )
        return self._build("initialize_mint", initialize_mint, params)

    def build_mint_to(
        self,
        mint: Pubkey,
        destination: Pubkey,
        mint_authority: Pubkey,
        amount: int,
        decimals: int
    ) -> Instruction:
        params = MintToCheckedParams(
            program_id=TOKEN_PROGRAM_ID,
            mint=mint,
            dest=destination,
            mint_authority=mint_authority,
            amount=amount,
            decimals=decimals,
        )
        return self._build("mint_to_checked", mint_to_checked, params)

    def build_sol_transfer(self, from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int) -> Instruction:
        params = SystemTransferParams(from_pubkey=from_pubkey, to_pubkey=to_pubkey, lamports=lamports)
        return self._build("system_transfer", system_transfer, params)

    def build_token_transfer(
        self,
        source: Pubkey,
        destination: Pubkey,
        owner: Pubkey,
        mint: Pubkey,
        amount: int,
        decimals: Optional[int] = None
    ) -> Instruction:
        if decimals is None:
            params = TransferParams(
                program_id=TOKEN_PROGRAM_ID,
                source=source,
                dest=destination,
                owner=owner,
                amount=amount,
            )
            return self._build("transfer", transfer, params)

        params = TransferCheckedParams(
            program_id=TOKEN_PROGRAM_ID,
            source=source,
            mint=mint,
            dest=destination,
            owner=owner,
            amount=amount,
            decimals=decimals,
        )
        return self._build("transfer_checked", transfer_checked, params)

    def sign_message(self, secret: bytes, message: bytes) -> Tuple[bytes, Pubkey]:
        """Sign a message with a 64-byte keypair encoding.

        Raises:
            InvalidFormat: If the bytes do not form a consistent keypair
        """
        try:
            keypair = Keypair.from_bytes(secret)
        except ValueError as e:
            # The trailing 32 bytes must be the public key of the leading seed
            seed, public = secret[:32], secret[32:]
            if len(secret) == KEYPAIR_LENGTH and bytes(Keypair.from_seed(seed).pubkey()) != public:
                raise InvalidFormat(
                    "Invalid secret: public key does not match secret key",
                    details={"error": str(e)}
                )
            raise InvalidFormat("Invalid secret: not a valid keypair", details={"error": str(e)})
        signature = keypair.sign_message(message)
        return bytes(signature), keypair.pubkey()

    def verify_message(self, pubkey: Pubkey, signature: bytes, message: bytes) -> bool:
        return Signature.from_bytes(signature).verify(pubkey, message)

    @staticmethod
    def _build(name, builder, params) -> Instruction:
        """Run an SDK instruction builder, translating its failures."""
        try:
            return builder(params)
        except Exception as e:
            logger.exception(f"Instruction builder {name} rejected its input")
            raise CollaboratorFailure(f"Failed to build {name} instruction", details={"error": str(e)})
