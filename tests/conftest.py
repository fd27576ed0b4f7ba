"""
Pytest configuration and shared fixtures.

Provides a fake payment client standing in for Stripe, a FastAPI
test client wired to it, and a clean configuration environment.
"""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_payment_client
from app.main import app


CONFIG_VARS = ("STRIPE_SECRET_KEY", "SUCCESS_URL", "CANCEL_URL", "LOG_LEVEL")

SESSION_URL = "https://checkout.stripe.com/c/pay/cs_test_123"


class FakePaymentClient:
    """Records session requests and returns a canned session or raises."""

    def __init__(self, url: str = SESSION_URL, error: Optional[Exception] = None):
        self.url = url
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def create_session(self, params: Dict[str, Any]):
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(id="cs_test_123", url=self.url)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration variables so defaults apply unless a test sets them."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def payment_client() -> FakePaymentClient:
    return FakePaymentClient()


@pytest.fixture
def client(payment_client):
    """Test client whose Stripe dependency is the fake payment client."""
    app.dependency_overrides[get_payment_client] = lambda: payment_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
