"""Test fixtures and utilities."""

import pytest

from money_client.api_client import MoneyClient
from money_client.session_store import Identity, MemorySessionStore

BASE_URL = "http://money.test"
TOKEN = "test-token-12345"


@pytest.fixture
def identity() -> Identity:
    """Logged-in identity as stored after POST /identity/auth."""
    return Identity(
        access_token=TOKEN,
        user={"id": 7, "email": "john@example.com", "configuration": {"defaultCurrency": 1}},
    )


@pytest.fixture
def store(identity) -> MemorySessionStore:
    """Session store holding a valid token."""
    return MemorySessionStore(identity=identity)


@pytest.fixture
def anonymous_store() -> MemorySessionStore:
    """Session store without identity."""
    return MemorySessionStore()


@pytest.fixture
def client(store) -> MoneyClient:
    """Authenticated client."""
    return MoneyClient(BASE_URL, store)


@pytest.fixture
def sample_transactions() -> list[dict]:
    """Five transactions as the listing endpoint returns them."""
    return [
        {
            "id": i,
            "operation": "cost",
            "name": f"Groceries #{i}",
            "value": 12.5 * i,
            "timestamp": f"2024-11-{10 + i:02d}T10:00:00",
            "currency": {"id": 1, "name": "EUR", "sign": "€"},
        }
        for i in range(1, 6)
    ]
