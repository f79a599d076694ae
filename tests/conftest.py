"""Shared pytest fixtures for the person test suite.

Fixtures defined here are available to all test modules (unit and
integration) without any import.

No AWS credentials are required: the ``agent_runner`` fixture patches
``BedrockModel`` before any SDK initialisation can attempt a network call.
"""

import datetime
import os

import pytest
from unittest.mock import MagicMock, patch

# ---------------------------------------------------------------------------
# Ensure MODEL_ARN is set before any test module is collected.
# The module-level ``settings = Settings()`` call in config.py runs at
# collection time; without this sentinel value pydantic-settings raises a
# ValidationError and the entire collection fails.
# ---------------------------------------------------------------------------
os.environ.setdefault("MODEL_ARN", "arn:aws:bedrock:us-east-1::foundation-model/test-model")


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_bedrock_model() -> MagicMock:
    """A MagicMock standing in for ``BedrockModel``; no AWS credentials needed."""
    model = MagicMock()
    model.invoke.return_value = {
        "role": "assistant",
        "content": [{"type": "text", "text": "Mocked response"}],
    }
    return model


# ---------------------------------------------------------------------------
# Agent fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def agent_runner(mock_bedrock_model: MagicMock):
    """Fully constructed ``strands.Agent`` with ``BedrockModel`` patched out.

    The tool registry, system prompt, and message list are live, but the
    underlying model never makes a Bedrock API call.
    """
    with patch("person.agent.BedrockModel", return_value=mock_bedrock_model):
        from person.agent import create_agent
        return create_agent()


# ---------------------------------------------------------------------------
# Date fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def april_start() -> datetime.date:
    """Start date whose spans to ``just_under_three_years`` and
    ``exact_three_years`` are used across the diff tests."""
    return datetime.date(2000, 4, 17)


@pytest.fixture
def just_under_three_years() -> datetime.date:
    """One month and one day short of three years after ``april_start``."""
    return datetime.date(2003, 3, 16)


@pytest.fixture
def exact_three_years() -> datetime.date:
    """Exactly three years after ``april_start``."""
    return datetime.date(2003, 4, 17)


@pytest.fixture
def leap_day() -> datetime.date:
    """A valid leap-day date (2000 is divisible by 400)."""
    return datetime.date(2000, 2, 29)
