"""Request models for the API.

Every field is optional at the schema level: presence is checked by the
handlers so that a missing field produces a ``MissingField`` error naming
the wire field rather than a framework validation message. Numeric fields are
strict integers: booleans, floats and numeric strings are rejected.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class GatewayRequest(BaseModel):
    """Base model for request payloads using camelCase wire names."""

    model_config = ConfigDict(populate_by_name=True)


class BalanceRequest(GatewayRequest):
    """Model for balance lookup requests."""

    public_key: Optional[str] = Field(None, description="Account address (base58 or hex)")


class CreateTokenRequest(GatewayRequest):
    """Model for mint initialization requests."""

    mint_authority: Optional[str] = Field(None, alias="mintAuthority", description="Mint authority address")
    mint: Optional[str] = Field(None, description="Mint account address")
    decimals: Optional[StrictInt] = Field(None, description="Token decimal places (0-9)")


class MintTokenRequest(GatewayRequest):
    """Model for mint-to requests."""

    mint: Optional[str] = Field(None, description="Mint account address")
    mint_authority: Optional[str] = Field(None, alias="mintAuthority", description="Mint authority address")
    token_account: Optional[str] = Field(None, alias="tokenAccount", description="Destination token account")
    amount: Optional[StrictInt] = Field(None, description="Amount to mint in base units")
    decimals: Optional[StrictInt] = Field(None, description="Token decimal places (defaults to 9)")


class SignMessageRequest(GatewayRequest):
    """Model for message signing requests."""

    message: Optional[str] = Field(None, description="UTF-8 message to sign")
    secret: Optional[str] = Field(None, description="Base58-encoded 64-byte keypair")


class VerifyMessageRequest(GatewayRequest):
    """Model for signature verification requests."""

    message: Optional[str] = Field(None, description="UTF-8 message that was signed")
    signature: Optional[str] = Field(None, description="Base64-encoded signature")
    pubkey: Optional[str] = Field(None, description="Signer address")


class SendSolRequest(GatewayRequest):
    """Model for native SOL transfer requests."""

    from_address: Optional[str] = Field(None, alias="from", description="Sender address")
    to_address: Optional[str] = Field(None, alias="to", description="Recipient address")
    lamports: Optional[StrictInt] = Field(None, description="Amount in lamports")


class SendTokenRequest(GatewayRequest):
    """Model for SPL token transfer requests."""

    destination: Optional[str] = Field(None, description="Recipient wallet address")
    mint: Optional[str] = Field(None, description="Mint account address")
    owner: Optional[str] = Field(None, description="Sender wallet address")
    amount: Optional[StrictInt] = Field(None, description="Amount in base units")
    decimals: Optional[StrictInt] = Field(None, description="Token decimals; enables a checked transfer")
