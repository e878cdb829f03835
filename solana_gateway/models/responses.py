"""Response models for the API.

This module defines the typed payloads carried in the ``data`` field of the
response envelope.
"""

import base64
from typing import List

from pydantic import BaseModel, Field
from solders.instruction import Instruction


class HelloResponse(BaseModel):
    """Model for the greeting endpoint."""

    message: str = Field(..., description="Greeting text")


class HealthResponse(BaseModel):
    """Model for health check responses."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")
    environment: str = Field(..., description="Deployment environment")


class BalanceResponse(BaseModel):
    """Model for account balance responses."""

    pubkey: str = Field(..., description="Account address")
    lamports: int = Field(..., description="Balance in lamports")
    sol: float = Field(..., description="Balance in SOL")


class AirdropResponse(BaseModel):
    """Model for faucet airdrop responses."""

    pubkey: str = Field(..., description="Freshly generated account that was funded")
    signature: str = Field(..., description="Airdrop transaction signature")
    lamports: int = Field(..., description="Amount requested from the faucet")


class KeypairResponse(BaseModel):
    """Model for keypair generation responses."""

    pubkey: str = Field(..., description="Public key (base58)")
    secret: str = Field(..., description="64-byte keypair (base58)")


class AccountMetaResponse(BaseModel):
    """Model for an account referenced by an instruction."""

    pubkey: str = Field(..., description="Account address")
    is_signer: bool = Field(..., description="Whether the account must sign")
    is_writable: bool = Field(..., description="Whether the account is written")


class InstructionResponse(BaseModel):
    """Model for an unsigned, unsubmitted instruction."""

    program_id: str = Field(..., description="Program that executes the instruction")
    accounts: List[AccountMetaResponse] = Field(..., description="Accounts touched by the instruction")
    instruction_data: str = Field(..., description="Instruction payload (base64)")

    @classmethod
    def from_instruction(cls, instruction: Instruction) -> "InstructionResponse":
        """Build the response from a ``solders`` instruction."""
        return cls(
            program_id=str(instruction.program_id),
            accounts=[
                AccountMetaResponse(
                    pubkey=str(meta.pubkey),
                    is_signer=meta.is_signer,
                    is_writable=meta.is_writable,
                )
                for meta in instruction.accounts
            ],
            instruction_data=base64.b64encode(bytes(instruction.data)).decode("ascii"),
        )


class SignMessageResponse(BaseModel):
    """Model for message signing responses."""

    signature: str = Field(..., description="ed25519 signature (base64)")
    public_key: str = Field(..., description="Signer address")
    message: str = Field(..., description="The message that was signed")


class VerifyMessageResponse(BaseModel):
    """Model for signature verification responses."""

    valid: bool = Field(..., description="Whether the signature is valid")
    message: str = Field(..., description="The message that was checked")
    pubkey: str = Field(..., description="Claimed signer address")
