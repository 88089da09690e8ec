"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from scoreboard.domain import EntryExitValues, IndustryThreshold, StockMetrics

# Configure asyncio
pytest_plugins = ["pytest_asyncio"]


@pytest.fixture(scope="function", autouse=True)
def reset_singletons():
    """Reset cached scoring config and service around each test."""
    import scoreboard.scoring.service as scoring_service
    from scoreboard.scoring.config import get_scoring_config

    get_scoring_config.cache_clear()
    scoring_service._service = None

    yield

    get_scoring_config.cache_clear()
    scoring_service._service = None


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    from scoreboard.api.app import create_api_app

    app = create_api_app()
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client for the FastAPI app."""
    from scoreboard.api.app import create_api_app

    app = create_api_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def test_threshold() -> IndustryThreshold:
    """Threshold record for the test industry."""
    return IndustryThreshold(
        industry="Test Industry",
        irr=25,
        leverage_f2_min=2.0,
        leverage_f2_max=3.0,
        ro40_min=0.15,
        ro40_max=0.25,
        cash_sdebt_min=0.7,
        cash_sdebt_max=1.2,
        current_ratio_min=1.1,
        current_ratio_max=2.0,
    )


@pytest.fixture
def thresholds(test_threshold: IndustryThreshold) -> list[IndustryThreshold]:
    """Threshold table with one configured industry."""
    return [test_threshold]


@pytest.fixture
def green_fundamentals() -> dict:
    """Fundamental figures that classify GREEN against the test industry."""
    return {
        "value_creation": 10.0,
        "munger_quality_score": 75.0,
        "irr": 30.0,
        "ro40_f1": 30.0,
        "ro40_f2": 30.0,
        "leverage_f2": 1.5,
        "cash_sdebt": 1.5,
        "current_ratio": 1.5,
        "pe1_industry": -10.0,
        "pe2_industry": -5.0,
        "tb_s_price": 1.2,
    }


@pytest.fixture
def green_stock(green_fundamentals: dict) -> StockMetrics:
    """Stock whose fundamentals are all GREEN and technicals all BLANK."""
    return StockMetrics(
        ticker="TST",
        company_name="Test Corp",
        industry="Test Industry",
        **green_fundamentals,
    )


@pytest.fixture
def theo_entry_green() -> EntryExitValues:
    """Targets that make TheoEntry GREEN at a price of 100."""
    return EntryExitValues(entry1=100, exit1=170)
