"""
Pytest fixtures for openai_maxim tests.

Provides mocks of the Maxim SDK so no test reaches the network.

Key fixture pattern:
- mock_maxim_logger: MagicMock standing in for maxim's Logger
- mock_client_factory: returns a MagicMock Maxim client whose logger()
  yields mock_maxim_logger
- Tests verify SDK calls using assert_called_once() and call_args
"""

from unittest.mock import MagicMock

import pytest

from openai_maxim.config import MaximSettings
from openai_maxim.runtime import MaximLoggerHandle


@pytest.fixture
def settings() -> MaximSettings:
    return MaximSettings(api_key="test-key", log_repo_id="repo-123")


@pytest.fixture
def mock_maxim_logger() -> MagicMock:
    """Maxim logger whose trace() returns a trace with a generation."""
    maxim_logger = MagicMock(name="maxim_logger")
    trace = maxim_logger.trace.return_value
    trace.generation.return_value = MagicMock(name="generation")
    return maxim_logger


@pytest.fixture
def mock_maxim_client(mock_maxim_logger) -> MagicMock:
    client = MagicMock(name="maxim_client")
    client.logger.return_value = mock_maxim_logger
    return client


@pytest.fixture
def mock_client_factory(mock_maxim_client) -> MagicMock:
    return MagicMock(return_value=mock_maxim_client)


@pytest.fixture
def handle(settings, mock_client_factory) -> MaximLoggerHandle:
    return MaximLoggerHandle(settings=settings, client_factory=mock_client_factory)
