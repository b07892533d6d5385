"""Shared test fixtures for typed answer scoring backend tests."""

from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from answer_scoring.api.dependencies import get_scorer
from answer_scoring.core.trial_scorer import TrialScorer
from answer_scoring.main import app


@pytest.fixture
def on_unclear() -> MagicMock:
    """Callback standing in for the host's respondent warning."""
    return MagicMock()


@pytest.fixture
def scorer(on_unclear: MagicMock) -> TrialScorer:
    """Scorer with the default threshold and a mocked unclear callback."""
    return TrialScorer(threshold=3, near_miss_margin=2, on_unclear=on_unclear)


@pytest.fixture(autouse=True)
def _fresh_api_scorer():
    """Rebuild the API scorer per test so settings patches take effect."""
    get_scorer.cache_clear()
    yield
    get_scorer.cache_clear()


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
