"""
Runtime layer - Maxim logger lifecycle.

Components:
    MaximLoggerHandle: One-time initialized Maxim logger with explicit shutdown
    LoggerInitializationError: Raised when the logger cannot be created
"""

from .logger_handle import (
    ClientFactory,
    LoggerInitializationError,
    MaximLoggerHandle,
    default_client_factory,
)

__all__ = [
    "ClientFactory",
    "LoggerInitializationError",
    "MaximLoggerHandle",
    "default_client_factory",
]
