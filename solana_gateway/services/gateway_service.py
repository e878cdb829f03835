"""
Gateway service for the Solana gateway.

Each public method is one endpoint handler. Handlers validate in a fixed
order (presence, then format and range, then semantics), make at most one
call into the ledger client and return a typed result. Failures are raised
as ``GatewayError`` subclasses and rendered by the HTTP layer.
"""

import base64
import logging
from typing import Optional

import base58
from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM

from solana_gateway.clients.ledger_client import LedgerClient
from solana_gateway.config import SolanaConfig
from solana_gateway.constants import (
    DEFAULT_DECIMALS,
    HELLO_MESSAGE,
    LAMPORTS_PER_SOL,
    MAX_SAFE_AMOUNT,
    MAX_TRANSFER_LAMPORTS,
    U64_MAX,
)
from solana_gateway.models.requests import (
    CreateTokenRequest,
    MintTokenRequest,
    SendSolRequest,
    SendTokenRequest,
    SignMessageRequest,
    VerifyMessageRequest,
)
from solana_gateway.models.responses import (
    AirdropResponse,
    BalanceResponse,
    HelloResponse,
    InstructionResponse,
    KeypairResponse,
    SignMessageResponse,
    VerifyMessageResponse,
)
from solana_gateway.utils.errors import SemanticViolation
from solana_gateway.utils.keys import is_zero_pubkey
from solana_gateway.utils.validation import (
    decode_keypair_secret,
    decode_signature,
    encode_message,
    parse_account_field,
    require,
    validate_amount,
    validate_decimals,
)

# Configure logger
logger = logging.getLogger(__name__)


class GatewayService:
    """Endpoint handlers for the gateway.

    The service is stateless apart from its collaborators, so one instance
    can serve every request.
    """

    def __init__(self, ledger: LedgerClient, config: SolanaConfig):
        """
        Initialize the gateway service.

        Args:
            ledger: Client used for remote calls, instruction building and signatures
            config: Solana settings (airdrop amount)
        """
        self.ledger = ledger
        self.config = config

    def _parse_key(self, value: str, field: str) -> Pubkey:
        return parse_account_field(value, field, parser=self.ledger.parse_key)

    def hello(self) -> HelloResponse:
        return HelloResponse(message=HELLO_MESSAGE)

    async def get_balance(self, public_key: Optional[str]) -> BalanceResponse:
        """Look up the lamport balance of an account.

        Args:
            public_key: Account address, base58 or hex

        Returns:
            The balance in lamports and SOL
        """
        public_key = require(public_key, "public_key")
        pubkey = self._parse_key(public_key, "public_key")

        lamports = await self.ledger.get_balance(pubkey)
        logger.info(f"Balance of {pubkey}: {lamports} lamports")
        return BalanceResponse(
            pubkey=str(pubkey),
            lamports=lamports,
            sol=lamports / LAMPORTS_PER_SOL,
        )

    async def airdrop(self) -> AirdropResponse:
        """Fund a freshly generated account from the faucet."""
        keypair = self.ledger.generate_keypair()
        pubkey = keypair.pubkey()
        lamports = self.config.airdrop_lamports

        signature = await self.ledger.request_airdrop(pubkey, lamports)
        logger.info(f"Airdropped {lamports} lamports to {pubkey}: {signature}")
        return AirdropResponse(pubkey=str(pubkey), signature=signature, lamports=lamports)

    def generate_keypair(self) -> KeypairResponse:
        keypair = self.ledger.generate_keypair()
        secret = base58.b58encode(bytes(keypair)).decode("ascii")
        return KeypairResponse(pubkey=str(keypair.pubkey()), secret=secret)

    def create_token(self, request: CreateTokenRequest) -> InstructionResponse:
        """Build an unsigned InitializeMint instruction."""
        mint_authority = require(request.mint_authority, "mintAuthority")
        mint = require(request.mint, "mint")
        decimals = require(request.decimals, "decimals")

        authority_key = self._parse_key(mint_authority, "mintAuthority")
        mint_key = self._parse_key(mint, "mint")
        validate_decimals(decimals)

        instruction = self.ledger.build_initialize_mint(mint_key, authority_key, decimals)
        return InstructionResponse.from_instruction(instruction)

    def mint_token(self, request: MintTokenRequest) -> InstructionResponse:
        """Build an unsigned MintToChecked instruction."""
        mint = require(request.mint, "mint")
        mint_authority = require(request.mint_authority, "mintAuthority")
        token_account = require(request.token_account, "tokenAccount")
        amount = require(request.amount, "amount")

        mint_key = self._parse_key(mint, "mint")
        authority_key = self._parse_key(mint_authority, "mintAuthority")
        destination = self._parse_key(token_account, "tokenAccount")
        decimals = DEFAULT_DECIMALS if request.decimals is None else request.decimals
        validate_decimals(decimals)
        validate_amount(amount, "amount", U64_MAX)

        instruction = self.ledger.build_mint_to(mint_key, destination, authority_key, amount, decimals)
        return InstructionResponse.from_instruction(instruction)

    def sign_message(self, request: SignMessageRequest) -> SignMessageResponse:
        message = require(request.message, "message")
        secret = require(request.secret, "secret")

        secret_bytes = decode_keypair_secret(secret)
        signature, signer = self.ledger.sign_message(secret_bytes, encode_message(message))
        return SignMessageResponse(
            signature=base64.b64encode(signature).decode("ascii"),
            public_key=str(signer),
            message=message,
        )

    def verify_message(self, request: VerifyMessageRequest) -> VerifyMessageResponse:
        message = require(request.message, "message")
        signature = require(request.signature, "signature")
        pubkey = require(request.pubkey, "pubkey")

        signature_bytes = decode_signature(signature)
        signer = self._parse_key(pubkey, "pubkey")

        valid = self.ledger.verify_message(signer, signature_bytes, encode_message(message))
        return VerifyMessageResponse(valid=valid, message=message, pubkey=str(signer))

    def send_sol(self, request: SendSolRequest) -> InstructionResponse:
        """Build an unsigned System Program transfer.

        Raises:
            SemanticViolation: For self-transfers, a zero sender or a
                transfer into the System Program (the zero address)
        """
        from_address = require(request.from_address, "from")
        to_address = require(request.to_address, "to")
        lamports = require(request.lamports, "lamports")

        sender = self._parse_key(from_address, "from")
        recipient = self._parse_key(to_address, "to")
        validate_amount(lamports, "lamports", MAX_SAFE_AMOUNT)
        validate_amount(lamports, "lamports", MAX_TRANSFER_LAMPORTS)

        if sender == recipient:
            raise SemanticViolation("Cannot transfer to the same address")
        if is_zero_pubkey(sender):
            raise SemanticViolation("Sender cannot be the zero address")
        if recipient == SYSTEM_PROGRAM:
            raise SemanticViolation("Cannot transfer to the System Program address")

        instruction = self.ledger.build_sol_transfer(sender, recipient, lamports)
        return InstructionResponse.from_instruction(instruction)

    def send_token(self, request: SendTokenRequest) -> InstructionResponse:
        """Build an unsigned SPL token transfer between associated token accounts.

        A checked transfer is built when ``decimals`` is supplied.
        """
        destination = require(request.destination, "destination")
        mint = require(request.mint, "mint")
        owner = require(request.owner, "owner")
        amount = require(request.amount, "amount")

        destination_key = self._parse_key(destination, "destination")
        mint_key = self._parse_key(mint, "mint")
        owner_key = self._parse_key(owner, "owner")
        if request.decimals is not None:
            validate_decimals(request.decimals)
        validate_amount(amount, "amount", MAX_SAFE_AMOUNT)

        source_ata = self.ledger.associated_token_address(owner_key, mint_key)
        destination_ata = self.ledger.associated_token_address(destination_key, mint_key)
        if source_ata == destination_ata:
            raise SemanticViolation(
                "Source and destination token accounts are the same",
                details={"token_account": str(source_ata)}
            )

        instruction = self.ledger.build_token_transfer(
            source_ata, destination_ata, owner_key, mint_key, amount, request.decimals
        )
        return InstructionResponse.from_instruction(instruction)
