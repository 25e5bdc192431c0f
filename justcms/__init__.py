"""JustCMS - typed async client for the JustCMS public API.

This package provides:
- A client for categories, pages, menus and layouts
- Pydantic models for every API response
- Helpers for content blocks, image variants and categories

Entry point is `create_client()` in client.py.
"""

from .client import JustCMSClient, close_client, create_client, get_client
from .common.schemas import PageFilters
from .common.utils import get_first_image, get_large_image_variant, has_category, is_block_has_style
from .core.config import ClientConfig, resolve_config
from .core.exceptions import APIError, ConfigurationError, JustCMSError

__all__ = [
    "JustCMSClient",
    "create_client",
    "get_client",
    "close_client",
    "ClientConfig",
    "resolve_config",
    "PageFilters",
    "JustCMSError",
    "ConfigurationError",
    "APIError",
    "is_block_has_style",
    "get_large_image_variant",
    "get_first_image",
    "has_category",
]
