"""Integration tests for the token API routes."""

import base64

import pytest

from solana_gateway.constants import TOKEN_PROGRAM_ID
from tests.fixtures.common import ALICE, BOB, MINT


@pytest.fixture
def create_payload():
    return {
        "mintAuthority": str(ALICE.pubkey()),
        "mint": str(MINT.pubkey()),
        "decimals": 6,
    }


@pytest.fixture
def mint_payload():
    return {
        "mint": str(MINT.pubkey()),
        "mintAuthority": str(ALICE.pubkey()),
        "tokenAccount": str(BOB.pubkey()),
        "amount": 1_000_000,
    }


def test_create_token(client, create_payload):
    """Test building a mint initialization instruction."""
    response = client.post("/token/create", json=create_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert "error" not in body
    data = body["data"]
    assert data["program_id"] == TOKEN_PROGRAM_ID
    assert data["accounts"][0] == {
        "pubkey": str(MINT.pubkey()),
        "is_signer": False,
        "is_writable": True,
    }
    assert base64.b64decode(data["instruction_data"])[1] == 6


@pytest.mark.parametrize("decimals", [0, 9])
def test_create_token_decimal_bounds(client, create_payload, decimals):
    create_payload["decimals"] = decimals

    response = client.post("/token/create", json=create_payload)

    assert response.status_code == 200


def test_create_token_too_many_decimals(client, create_payload):
    create_payload["decimals"] = 10

    response = client.post("/token/create", json=create_payload)

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "decimals must be between 0 and 9, got 10",
    }


def test_create_token_missing_authority(client, create_payload):
    del create_payload["mintAuthority"]

    response = client.post("/token/create", json=create_payload)

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required field: mintAuthority"


def test_create_token_without_body(client):
    response = client.post("/token/create")

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required field: mintAuthority"


def test_create_token_invalid_mint(client, create_payload):
    create_payload["mint"] = "invalid-address"

    response = client.post("/token/create", json=create_payload)

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid mint:")


def test_mint_token(client, mint_payload):
    response = client.post("/token/mint", json=mint_payload)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["program_id"] == TOKEN_PROGRAM_ID
    assert [account["pubkey"] for account in data["accounts"]] == [
        str(MINT.pubkey()), str(BOB.pubkey()), str(ALICE.pubkey())
    ]
    assert data["accounts"][2]["is_signer"] is True
    raw = base64.b64decode(data["instruction_data"])
    assert raw[1:9] == (1_000_000).to_bytes(8, "little")
    assert raw[9] == 9


def test_mint_token_zero_amount(client, mint_payload):
    mint_payload["amount"] = 0

    response = client.post("/token/mint", json=mint_payload)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "amount must be greater than 0"}


def test_mint_token_hex_accounts(client, mint_payload):
    mint_payload["tokenAccount"] = "0x" + bytes(BOB.pubkey()).hex()

    response = client.post("/token/mint", json=mint_payload)

    assert response.status_code == 200
    assert response.json()["data"]["accounts"][1]["pubkey"] == str(BOB.pubkey())


def test_mint_token_too_many_decimals(client, mint_payload):
    mint_payload["decimals"] = 10

    response = client.post("/token/mint", json=mint_payload)

    assert response.status_code == 400
    assert response.json()["error"] == "decimals must be between 0 and 9, got 10"


def test_mint_token_single_unit(client, mint_payload):
    mint_payload["amount"] = 1

    response = client.post("/token/mint", json=mint_payload)

    assert response.status_code == 200


@pytest.mark.parametrize("value", [True, 1.0, "5"])
def test_mint_token_rejects_non_integer_amount(client, mint_payload, value):
    mint_payload["amount"] = value

    response = client.post("/token/mint", json=mint_payload)

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "amount" in response.json()["error"]


def test_create_token_rejects_boolean_decimals(client, create_payload):
    create_payload["decimals"] = True

    response = client.post("/token/create", json=create_payload)

    assert response.status_code == 400
    assert "decimals" in response.json()["error"]
