"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient

from localdeals.config.settings import Settings
from localdeals.models.deal import Deal
from localdeals.models.offer import Offer
from localdeals.server.app import create_app
from tests.fakes import InMemoryListingRepository, InMemoryOrderRepository


@pytest.fixture
def test_settings():
    """Settings that never touch real infrastructure."""
    return Settings(
        mongodb_url="mongodb://localhost:27017",
        rate_limit_enabled=False,
        _env_file=None,
    )


@pytest.fixture
def offer_repo():
    return InMemoryListingRepository(Offer)


@pytest.fixture
def deal_repo():
    return InMemoryListingRepository(Deal)


@pytest.fixture
def order_repo():
    return InMemoryOrderRepository()


@pytest.fixture
def app(test_settings, offer_repo, deal_repo, order_repo):
    """Application wired to in-memory stores (lifespan not run)."""
    application = create_app(test_settings)
    application.state.offer_repo = offer_repo
    application.state.deal_repo = deal_repo
    application.state.order_repo = order_repo
    return application


@pytest.fixture
def api_client(app):
    """Synchronous HTTP client for contract tests."""
    return TestClient(app)
