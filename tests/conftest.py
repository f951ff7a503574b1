"""Pytest configuration and fixtures."""

import os
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment variables before importing settings
os.environ.setdefault("GOOGLE_API_KEY", "test-key")
os.environ.setdefault("SEED_DEMO_ORDERS", "true")

from nova_pos.clients import GeminiResponse  # noqa: E402
from nova_pos.config import get_settings  # noqa: E402
from nova_pos.ledger import LedgerStore, demo_orders  # noqa: E402

TODAY = date(2024, 1, 15)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so env changes in a test stay in that test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def today():
    """The fixed date store fixtures treat as today."""
    return TODAY


@pytest.fixture
def seeded_store():
    """Store holding the three demo orders, with a fixed clock."""
    return LedgerStore(demo_orders(), clock=lambda: TODAY)


@pytest.fixture
def empty_store():
    """Store with no orders and a fixed clock."""
    return LedgerStore(clock=lambda: TODAY)


@pytest.fixture
def mock_gemini_client():
    """Mock GeminiClient that answers with a fixed insight."""
    client = MagicMock()
    client.generate = AsyncMock(
        return_value=GeminiResponse(
            content="  Collect the $800 due this week and upsell confirmed clients.  ",
            stop_reason="end_turn",
            usage={"input_tokens": 60, "output_tokens": 20},
        )
    )
    return client


@pytest.fixture
def failing_gemini_client():
    """Mock GeminiClient whose call always fails."""
    client = MagicMock()
    client.generate = AsyncMock(side_effect=RuntimeError("quota exceeded"))
    return client
