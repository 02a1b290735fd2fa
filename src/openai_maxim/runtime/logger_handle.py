"""
Maxim logger lifecycle.

MaximLoggerHandle owns the Maxim client and the logger bound to one log
repository. Create one per process and pass it to the code that records
completions:

    handle = MaximLoggerHandle()
    recorder = MaximCompletionRecorder(handle)
    ...
    handle.shutdown()
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from maxim import Maxim

from openai_maxim.config import MaximSettings, load_maxim_settings

logger = logging.getLogger(__name__)

ClientFactory = Callable[[MaximSettings], Any]


class LoggerInitializationError(RuntimeError):
    """Maxim logger could not be created (missing configuration or SDK failure)."""


def default_client_factory(settings: MaximSettings) -> Maxim:
    """Build a Maxim SDK client from settings."""
    return Maxim({"api_key": settings.api_key})


class MaximLoggerHandle:
    """
    Lazily initialized, shareable Maxim logger.

    Initialization runs at most once per handle, even across threads;
    every caller gets the same logger until shutdown().
    """

    def __init__(
        self,
        settings: MaximSettings | None = None,
        client_factory: ClientFactory | None = None,
    ):
        self._settings = settings
        self._client_factory = client_factory or default_client_factory
        self._lock = threading.Lock()
        self._client: Any = None
        self._logger: Any = None

    @property
    def is_initialized(self) -> bool:
        return self._logger is not None

    def initialize(self) -> Any:
        """
        Create the Maxim client and logger if not done yet.

        Returns:
            The Maxim logger

        Raises:
            LoggerInitializationError: If settings are missing or the SDK
                fails to produce a logger
        """
        if self._logger is not None:
            return self._logger

        with self._lock:
            if self._logger is not None:
                return self._logger

            try:
                settings = self._settings or load_maxim_settings()
                client = self._client_factory(settings)
                maxim_logger = client.logger({"id": settings.log_repo_id})
                if not maxim_logger:
                    raise RuntimeError("Maxim returned no logger")
            except Exception as e:
                logger.error(f"Failed to initialize Maxim logger: {e}")
                raise LoggerInitializationError(
                    f"Failed to initialize Maxim logger: {e}"
                ) from e

            self._client = client
            self._logger = maxim_logger
            logger.info("Maxim logger initialized successfully")
            return maxim_logger

    def get(self) -> Any:
        """Return the Maxim logger, initializing it on first use."""
        return self.initialize()

    def shutdown(self) -> None:
        """Flush and release the logger and client. Safe to call repeatedly."""
        with self._lock:
            maxim_logger, client = self._logger, self._client
            self._logger = None
            self._client = None

        if maxim_logger is None:
            return

        try:
            maxim_logger.cleanup()
        finally:
            if client is not None:
                client.cleanup()
        logger.info("Maxim logger shut down")

    def __enter__(self) -> Any:
        return self.initialize()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()
