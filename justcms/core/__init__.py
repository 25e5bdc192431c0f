"""Core infrastructure: config, errors, logging."""

from .config import BASE_URL, ClientConfig, Config, resolve_config
from .exceptions import APIError, ConfigurationError, JustCMSError
from .logging import get_logger, setup_logging

__all__ = [
    "BASE_URL",
    "Config",
    "ClientConfig",
    "resolve_config",
    "JustCMSError",
    "ConfigurationError",
    "APIError",
    "setup_logging",
    "get_logger",
]
