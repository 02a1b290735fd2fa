"""Tests for MaximLoggerHandle lifecycle."""

import threading
from unittest.mock import MagicMock

import pytest

from openai_maxim.runtime import (
    LoggerInitializationError,
    MaximLoggerHandle,
    default_client_factory,
)


class TestInitialize:
    """Tests for one-time initialization."""

    def test_returns_sdk_logger(self, handle, mock_maxim_logger):
        """initialize() returns the logger produced by the client."""
        assert handle.initialize() is mock_maxim_logger
        assert handle.is_initialized

    def test_passes_settings_to_sdk(
        self, handle, settings, mock_client_factory, mock_maxim_client
    ):
        """The factory receives settings and the logger is bound to the repo."""
        handle.initialize()

        mock_client_factory.assert_called_once_with(settings)
        mock_maxim_client.logger.assert_called_once()
        logger_config = mock_maxim_client.logger.call_args[0][0]
        assert logger_config == {"id": "repo-123"}

    def test_default_factory_passes_dict_config(self, settings, monkeypatch):
        """The default factory builds Maxim from a plain dict config."""
        maxim_cls = MagicMock(name="Maxim")
        monkeypatch.setattr("openai_maxim.runtime.logger_handle.Maxim", maxim_cls)

        client = default_client_factory(settings)

        maxim_cls.assert_called_once_with({"api_key": "test-key"})
        assert client is maxim_cls.return_value

    def test_initializes_once(self, handle, mock_client_factory):
        """Repeated calls reuse the same logger."""
        first = handle.initialize()
        second = handle.get()

        assert first is second
        mock_client_factory.assert_called_once()

    def test_concurrent_initialize_builds_one_client(self, settings, mock_maxim_client):
        """Threads racing on initialize() share one client."""
        gate = threading.Event()

        def slow_factory(_settings):
            gate.wait(timeout=1)
            return mock_maxim_client

        factory = MagicMock(side_effect=slow_factory)
        handle = MaximLoggerHandle(settings=settings, client_factory=factory)
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(handle.initialize()))
            for _ in range(5)
        ]

        for thread in threads:
            thread.start()
        gate.set()
        for thread in threads:
            thread.join()

        factory.assert_called_once()
        assert len(results) == 5
        assert all(result is results[0] for result in results)

    def test_loads_settings_lazily(self, monkeypatch, mock_client_factory):
        """Without explicit settings the env is read at init time."""
        monkeypatch.setenv("MAXIM_API_KEY", "env-key")
        monkeypatch.setenv("MAXIM_LOG_REPO_ID", "env-repo")
        handle = MaximLoggerHandle(client_factory=mock_client_factory)

        handle.initialize()

        settings = mock_client_factory.call_args[0][0]
        assert settings.api_key == "env-key"
        assert settings.log_repo_id == "env-repo"


class TestInitializationErrors:
    """Tests for the single initialization error kind."""

    def test_missing_config(self, tmp_path, monkeypatch, mock_client_factory):
        """Missing settings surface as LoggerInitializationError."""
        monkeypatch.delenv("MAXIM_API_KEY", raising=False)
        monkeypatch.delenv("MAXIM_LOG_REPO_ID", raising=False)
        monkeypatch.setattr(
            "openai_maxim.config.loader.get_config_path",
            lambda: tmp_path / "maxim_config.yaml",
        )
        handle = MaximLoggerHandle(client_factory=mock_client_factory)

        with pytest.raises(LoggerInitializationError) as exc_info:
            handle.initialize()

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert "must be set" in str(exc_info.value)
        mock_client_factory.assert_not_called()
        assert not handle.is_initialized

    def test_sdk_returns_no_logger(self, handle, mock_maxim_client):
        """A falsy logger from the SDK is a failure."""
        mock_maxim_client.logger.return_value = None

        with pytest.raises(LoggerInitializationError):
            handle.initialize()

        assert not handle.is_initialized

    def test_sdk_raises(self, settings):
        """SDK exceptions are wrapped and chained."""
        factory = MagicMock(side_effect=ConnectionError("unreachable"))
        handle = MaximLoggerHandle(settings=settings, client_factory=factory)

        with pytest.raises(LoggerInitializationError) as exc_info:
            handle.initialize()

        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_no_retry_until_called_again(self, settings, mock_maxim_client):
        """A failed init is not retried behind the caller's back."""
        factory = MagicMock(side_effect=[ConnectionError("down"), mock_maxim_client])
        handle = MaximLoggerHandle(settings=settings, client_factory=factory)

        with pytest.raises(LoggerInitializationError):
            handle.initialize()
        assert factory.call_count == 1

        assert handle.initialize() is mock_maxim_client.logger.return_value
        assert factory.call_count == 2


class TestShutdown:
    """Tests for explicit teardown."""

    def test_cleans_up_logger_and_client(
        self, handle, mock_maxim_logger, mock_maxim_client
    ):
        """shutdown() cleans up both SDK objects."""
        handle.initialize()

        handle.shutdown()

        mock_maxim_logger.cleanup.assert_called_once()
        mock_maxim_client.cleanup.assert_called_once()
        assert not handle.is_initialized

    def test_shutdown_before_init_is_noop(self, handle, mock_client_factory):
        """Nothing happens when never initialized."""
        handle.shutdown()

        mock_client_factory.assert_not_called()

    def test_reinitialize_after_shutdown(self, handle, mock_client_factory):
        """A new client is built after shutdown."""
        handle.initialize()
        handle.shutdown()
        handle.initialize()

        assert mock_client_factory.call_count == 2

    def test_client_cleaned_up_even_if_logger_cleanup_fails(
        self, handle, mock_maxim_logger, mock_maxim_client
    ):
        """Client cleanup runs when logger cleanup raises."""
        mock_maxim_logger.cleanup.side_effect = RuntimeError("flush failed")
        handle.initialize()

        with pytest.raises(RuntimeError):
            handle.shutdown()

        mock_maxim_client.cleanup.assert_called_once()
        assert not handle.is_initialized

    def test_context_manager(self, handle, mock_maxim_logger):
        """with-block initializes on enter and shuts down on exit."""
        with handle as maxim_logger:
            assert maxim_logger is mock_maxim_logger
            assert handle.is_initialized

        assert not handle.is_initialized
        mock_maxim_logger.cleanup.assert_called_once()
