from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from ..main import app

@pytest.fixture
def client() -> TestClient:
    # Entering the client runs the lifespan, which seeds a fresh store.
    with TestClient(app) as test_client:
        yield test_client


def _balance(client: TestClient, account_id: int) -> Decimal:
    response = client.get(f"/account/{account_id}")
    assert response.status_code == 200
    return Decimal(response.json()["balance"])


def test_healthcheck(client: TestClient) -> None:
    response = client.get("/healthcheck")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_get_account_by_id(client: TestClient) -> None:
    first = client.get("/account/1")
    assert first.status_code == 200
    assert first.json()["id"] == 1
    assert Decimal(first.json()["balance"]) == Decimal("4.5")

    second = client.get("/account/2")
    assert second.status_code == 200
    assert second.json()["id"] == 2
    assert Decimal(second.json()["balance"]) == Decimal("3.5")

    missing = client.get("/account/3")
    assert missing.status_code == 404
    assert missing.json() == {"kind": "AccountNotFound", "message": "account 3 not found"}

    assert client.get("/account").status_code == 404


def test_get_account_rejects_non_integer_id(client: TestClient) -> None:
    response = client.get("/account/abc")
    assert response.status_code == 400
    assert response.json()["kind"] == "MalformedRequest"


def test_transfer_happy_path(client: TestClient) -> None:
    response = client.post("/transfer", json={"from": 1, "to": 2, "amount": "1.00"})
    assert response.status_code == 200
    assert response.json() == {"status": "success"}

    assert _balance(client, 1) == Decimal("3.5")
    assert _balance(client, 2) == Decimal("4.5")


@pytest.mark.parametrize(
    "body, kind, message",
    [
        ({"from": 1, "to": 2, "amount": None}, "MissingAmount", "amount cannot be empty"),
        ({"from": None, "to": 2, "amount": "1"}, "MissingSource", "source account cannot be empty"),
        ({"from": 1, "to": None, "amount": "1"}, "MissingDestination", "destination account cannot be empty"),
        ({"from": 1, "to": 1, "amount": "1"}, "SelfTransfer", "Cannot transfer to self"),
        ({"from": 1, "to": 2, "amount": "-1"}, "NonPositiveAmount", "transfer amount has to be positive"),
        ({"from": 1, "to": 2, "amount": "0"}, "NonPositiveAmount", "transfer amount has to be positive"),
        ({"from": None, "to": 2, "amount": None}, "MissingAmount", "amount cannot be empty"),
        ({}, "MissingAmount", "amount cannot be empty"),
    ],
)
def test_transfer_validation_errors(
    client: TestClient, body: dict, kind: str, message: str
) -> None:
    response = client.post("/transfer", json=body)
    assert response.status_code == 400
    assert response.json() == {"kind": kind, "message": message}

    assert _balance(client, 1) == Decimal("4.5")
    assert _balance(client, 2) == Decimal("3.5")


def test_transfer_non_existing_accounts(client: TestClient) -> None:
    response = client.post("/transfer", json={"from": 100, "to": 101, "amount": "1"})
    assert response.status_code == 404
    assert response.json()["message"] == "account 100 not found"

    response = client.post("/transfer", json={"from": 1, "to": 101, "amount": "1"})
    assert response.status_code == 404
    assert response.json()["message"] == "account 101 not found"

    assert _balance(client, 1) == Decimal("4.5")


def test_transfer_insufficient_funds(client: TestClient) -> None:
    response = client.post("/transfer", json={"from": 1, "to": 2, "amount": "10.00"})
    assert response.status_code == 400
    assert response.json() == {"kind": "InsufficientFunds", "message": "insufficient funds"}

    assert _balance(client, 1) == Decimal("4.5")
    assert _balance(client, 2) == Decimal("3.5")


def test_transfer_whole_balance_leaves_zero(client: TestClient) -> None:
    response = client.post("/transfer", json={"from": 1, "to": 2, "amount": "4.5"})
    assert response.status_code == 200

    assert _balance(client, 1) == Decimal("0")
    assert _balance(client, 2) == Decimal("8.0")


def test_transfer_malformed_body(client: TestClient) -> None:
    response = client.post("/transfer", json={"from": "one", "to": 2, "amount": "1"})
    assert response.status_code == 400
    assert response.json()["kind"] == "MalformedRequest"

    response = client.post(
        "/transfer",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["kind"] == "MalformedRequest"


def test_each_client_gets_a_freshly_seeded_store() -> None:
    with TestClient(app) as first:
        first.post("/transfer", json={"from": 1, "to": 2, "amount": "2"})
        assert _balance(first, 1) == Decimal("2.5")

    with TestClient(app) as second:
        assert _balance(second, 1) == Decimal("4.5")


def test_transfer_accepts_json_numbers(client: TestClient) -> None:
    response = client.post("/transfer", json={"from": 1, "to": 2, "amount": 1})
    assert response.status_code == 200
    assert _balance(client, 1) == Decimal("3.5")
    assert _balance(client, 2) == Decimal("4.5")

    response = client.post("/transfer", json={"from": 1, "to": 2, "amount": 0.1})
    assert response.status_code == 200
    assert _balance(client, 1) == Decimal("3.4")
    assert _balance(client, 2) == Decimal("4.6")


def test_transfer_insufficient_funds_with_json_number(client: TestClient) -> None:
    response = client.post("/transfer", json={"from": 1, "to": 2, "amount": 10})
    assert response.status_code == 400
    assert response.json()["message"] == "insufficient funds"


@pytest.mark.parametrize("amount", ["0.001", "10000000000000000000"])
def test_transfer_rejects_amount_beyond_money_precision(client: TestClient, amount: str) -> None:
    response = client.post("/transfer", json={"from": 1, "to": 2, "amount": amount})
    assert response.status_code == 400
    assert response.json()["kind"] == "MalformedRequest"

    assert _balance(client, 1) == Decimal("4.5")
    assert _balance(client, 2) == Decimal("3.5")
