"""Shared fixtures."""

import json

import pytest
from unittest.mock import AsyncMock

from surrogate.services.store import SurrogateStore


@pytest.fixture
def store(tmp_path):
    """Store backed by a temporary data directory."""
    return SurrogateStore(data_dir=str(tmp_path / "data"))


@pytest.fixture
def model_reply():
    """Build a raw model reply from intent fields."""
    def _build(**fields):
        intent = {
            "response": "Done",
            "detectedTone": "Happy",
            "detectedLanguage": "en",
            "activeAgent": "Chat Agent",
        }
        intent.update(fields)
        return json.dumps(intent)
    return _build


@pytest.fixture
def transport():
    """Transport test double; set transport.complete.return_value per test."""
    double = AsyncMock()
    double.complete = AsyncMock(return_value='{"response": "Hello!", "activeAgent": "Chat Agent"}')
    return double
