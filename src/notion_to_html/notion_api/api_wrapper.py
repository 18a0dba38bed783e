"""API wrapper for the Notion REST API.

This module wraps the notion-client SDK and translates its HTTP exceptions
into our typed exception hierarchy. It exposes exactly the four calls the
rendering core needs: database query, page retrieval, block retrieval and
block-children listing.
"""

import logging
import re
from typing import Any, Dict, List, Optional

import httpx
from notion_client import Client, APIResponseError
from notion_client.errors import HTTPResponseError, RequestTimeoutError
from notion_client.helpers import collect_paginated_api

from .config import NotionConfig
from .errors import (
    ConfigError,
    InvalidCredentialsError,
    ObjectNotFoundError,
    RateLimitedError,
    APIUnreachableError,
    APIAccessError,
)

logger = logging.getLogger(__name__)

# Notion ids are UUIDs, with or without dashes
_NOTION_ID_PATTERN = re.compile(r'^[0-9a-fA-F]{32}$')


class NotionAPIWrapper:
    """Wrapper around notion_client.Client with error translation.

    The underlying client is created lazily on first use so that building a
    service never touches the network or validates credentials early.

    Example:
        >>> api = NotionAPIWrapper(NotionConfig(api_token="secret_..."))
        >>> page = api.fetch_page("0f3c0e4b9b8a4f7c8d1e2a3b4c5d6e7f")
    """

    def __init__(self, config: NotionConfig):
        """Initialize the wrapper.

        Args:
            config: Explicit Notion configuration
        """
        self._config = config
        self._client: Optional[Client] = None

    def _get_client(self) -> Client:
        """Get or create the notion_client.Client.

        Raises:
            InvalidCredentialsError: If the API token is missing
        """
        if self._client is None:
            self._config.validate()
            self._client = Client(
                auth=self._config.api_token,
                timeout_ms=self._config.timeout * 1000,
            )
        return self._client

    def _validate_id(self, object_id: str, kind: str = "object") -> None:
        """Validate that an id looks like a Notion UUID.

        Raises:
            ValueError: If object_id is empty or malformed
        """
        if not object_id or not str(object_id).strip():
            raise ValueError(f"{kind}_id cannot be empty")

        compact = str(object_id).strip().replace('-', '')
        if not _NOTION_ID_PATTERN.match(compact):
            raise ValueError(
                f"Invalid {kind}_id format: '{object_id}'. "
                f"Notion ids are 32 hexadecimal characters, optionally dashed."
            )

    def _sanitize_credentials(self, text: str) -> str:
        """Mask integration tokens and authorization headers in error text.

        Example:
            >>> api._sanitize_credentials("token secret_abc123xyz rejected")
            'token ***REDACTED*** rejected'
        """
        if not text:
            return text

        sanitized = re.sub(
            r'Authorization:\s*[^\n\r]+',
            'Authorization: ***REDACTED***',
            text,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'Bearer\s+[^\s\n\r]+',
            'Bearer ***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )
        # Internal integration tokens: secret_* (legacy) and ntn_* (current)
        sanitized = re.sub(
            r'\b(?:secret|ntn)_[A-Za-z0-9]+\b',
            '***REDACTED***',
            sanitized
        )
        return sanitized

    def _translate_error(self, exception: Exception, operation: str, object_id: str = "unknown") -> Exception:
        """Translate notion-client and httpx exceptions to typed errors.

        Args:
            exception: The original exception from the SDK
            operation: Description of the failed call (for logging)
            object_id: Id the call was made for

        Returns:
            Exception: One of our typed NotionAPIError subclasses
        """
        if isinstance(exception, (RequestTimeoutError, httpx.TimeoutException, httpx.TransportError)):
            return APIUnreachableError(operation)

        code = str(getattr(exception, 'code', '') or '')
        status = getattr(exception, 'status', None)

        if isinstance(exception, (APIResponseError, HTTPResponseError)):
            if code == 'unauthorized' or status == 401:
                return InvalidCredentialsError()
            if code == 'object_not_found' or status == 404:
                return ObjectNotFoundError(object_id)
            if code == 'rate_limited' or status == 429:
                return RateLimitedError(operation)

        safe_error_msg = self._sanitize_credentials(str(exception))
        logger.error(f"API operation failed: {operation} - {safe_error_msg}")
        return APIAccessError(f"Notion API failure during {operation}")

    def query_database(
        self,
        filter: Dict[str, Any],
        sorts: List[Dict[str, Any]],
        page_size: int = 10
    ) -> Dict[str, Any]:
        """Query the configured database.

        Args:
            filter: Notion filter object (e.g. ``{"and": [...]}``)
            sorts: Notion sort objects
            page_size: Maximum number of pages to return

        Returns:
            Dict with a ``results`` list of raw page objects

        Raises:
            ConfigError: If no database id is configured
            NotionAPIError: Translated API failure
        """
        database_id = self._config.database_id
        if not database_id:
            raise ConfigError("database_id is required to query pages", 'database_id')
        self._validate_id(database_id, "database")

        logger.debug(f"Notion API: databases.query({database_id}, page_size={page_size})")
        try:
            return self._get_client().databases.query(
                database_id=database_id,
                filter=filter,
                sorts=sorts,
                page_size=page_size,
            )
        except (APIResponseError, HTTPResponseError, RequestTimeoutError, httpx.HTTPError) as e:
            raise self._translate_error(e, f"databases.query({database_id})", database_id) from e

    def fetch_page(self, page_id: str) -> Dict[str, Any]:
        """Retrieve a raw page object.

        Raises:
            ValueError: If page_id is malformed
            NotionAPIError: Translated API failure
        """
        self._validate_id(page_id, "page")

        logger.debug(f"Notion API: pages.retrieve({page_id})")
        try:
            return self._get_client().pages.retrieve(page_id=page_id)
        except (APIResponseError, HTTPResponseError, RequestTimeoutError, httpx.HTTPError) as e:
            raise self._translate_error(e, f"pages.retrieve({page_id})", page_id) from e

    def fetch_block(self, block_id: str) -> Dict[str, Any]:
        """Retrieve a single raw block, bypassing any cache.

        Raises:
            ValueError: If block_id is malformed
            NotionAPIError: Translated API failure
        """
        self._validate_id(block_id, "block")

        logger.debug(f"Notion API: blocks.retrieve({block_id})")
        try:
            return self._get_client().blocks.retrieve(block_id=block_id)
        except (APIResponseError, HTTPResponseError, RequestTimeoutError, httpx.HTTPError) as e:
            raise self._translate_error(e, f"blocks.retrieve({block_id})", block_id) from e

    def fetch_block_children(self, block_id: str) -> Dict[str, Any]:
        """List every child block of a page or block.

        Follows ``next_cursor`` until the listing is exhausted, so the result
        is never truncated at the first API page.

        Returns:
            Dict of the form ``{"object": "list", "results": [...]}``

        Raises:
            ValueError: If block_id is malformed
            NotionAPIError: Translated API failure
        """
        self._validate_id(block_id, "block")

        logger.debug(f"Notion API: blocks.children.list({block_id})")
        try:
            results = collect_paginated_api(
                self._get_client().blocks.children.list,
                block_id=block_id,
                page_size=self._config.default_page_size,
            )
        except (APIResponseError, HTTPResponseError, RequestTimeoutError, httpx.HTTPError) as e:
            raise self._translate_error(e, f"blocks.children.list({block_id})", block_id) from e

        logger.debug(f"Fetched {len(results)} child blocks of {block_id}")
        return {'object': 'list', 'results': results}
