"""Notion client layer for notion-to-html.

This package wraps the notion-client SDK behind a small, typed interface and
holds the explicit configuration object and exception hierarchy.
"""

from .config import NotionConfig
from .api_wrapper import NotionAPIWrapper
from .errors import (
    NotionToHtmlError,
    NotionAPIError,
    InvalidCredentialsError,
    ObjectNotFoundError,
    RateLimitedError,
    APIUnreachableError,
    APIAccessError,
    ConfigError,
    FilesystemError,
)

__all__ = [
    "NotionConfig",
    "NotionAPIWrapper",
    "NotionToHtmlError",
    "NotionAPIError",
    "InvalidCredentialsError",
    "ObjectNotFoundError",
    "RateLimitedError",
    "APIUnreachableError",
    "APIAccessError",
    "ConfigError",
    "FilesystemError",
]
