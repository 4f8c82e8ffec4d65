"""Shared fixtures for wttr-cli tests."""

import httpx
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop any sink main() bound to a captured stream during the test."""
    yield
    logger.remove()


@pytest.fixture
def wttr_payload():
    """A trimmed-down wttr.in format=j1 response."""
    return {
        "current_condition": [
            {
                "FeelsLikeC": "13",
                "humidity": "72",
                "temp_C": "15",
                "weatherDesc": [{"value": "Partly cloudy"}],
                "windspeedKmph": "11",
            }
        ],
        "nearest_area": [{"areaName": [{"value": "London"}]}],
        "weather": [],
    }


@pytest.fixture
def mock_client():
    """Build an httpx.Client whose requests are answered by `handler`."""
    def _make(handler):
        return httpx.Client(transport=httpx.MockTransport(handler))
    return _make
