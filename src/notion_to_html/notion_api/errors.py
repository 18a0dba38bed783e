"""Typed exception hierarchy for notion-to-html errors.

This module defines the custom exceptions raised by the Notion API wrapper
and the configuration layer. All exceptions inherit from NotionToHtmlError
so callers can catch any library failure with a single except clause.
"""

from typing import Optional


class NotionToHtmlError(Exception):
    """Base exception for all notion-to-html errors."""
    pass


class NotionAPIError(NotionToHtmlError):
    """Base exception for failures talking to the Notion API."""
    pass


class InvalidCredentialsError(NotionAPIError):
    """Raised when the integration token is missing or rejected."""

    def __init__(self, message: str = "Notion API token is missing or invalid"):
        super().__init__(message)


class ObjectNotFoundError(NotionAPIError):
    """Raised when a page, block or database does not exist or is not shared."""

    def __init__(self, object_id: str):
        super().__init__(f"Notion object {object_id} not found")
        self.object_id = object_id


class RateLimitedError(NotionAPIError):
    """Raised when Notion answers with HTTP 429."""

    def __init__(self, operation: str):
        super().__init__(f"Rate limited by Notion API during {operation}")
        self.operation = operation


class APIUnreachableError(NotionAPIError):
    """Raised when the Notion API cannot be reached or times out."""

    def __init__(self, operation: str):
        super().__init__(f"Notion API is not reachable during {operation}")
        self.operation = operation


class APIAccessError(NotionAPIError):
    """Raised for any other Notion API failure."""

    def __init__(self, message: str = "Notion API failure"):
        super().__init__(message)


class ConfigError(NotionToHtmlError):
    """Raised when configuration or styling options fail validation."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class FilesystemError(NotionToHtmlError):
    """Raised when reading or writing a local file fails."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
