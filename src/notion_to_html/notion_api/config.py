"""Explicit configuration for the Notion service.

Callers build a NotionConfig themselves and hand it to NotionService; there
is no module-level settings object and nothing is read from the environment.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import ConfigError, InvalidCredentialsError


def _default_cache() -> Any:
    # Imported lazily, the service package depends on this module.
    from ..service.cache import MemoryCache
    return MemoryCache()


@dataclass
class NotionConfig:
    """Settings for talking to a Notion database.

    Attributes:
        api_token: Notion integration token
        database_id: Database queried by NotionService.get_pages
        timeout: Seconds to wait for a Notion API response
        default_page_size: Page size used when listing block children
        cache: Read-through cache for block-children lists; any object with
            a ``fetch(key, compute_fn)`` method
    """
    api_token: str
    database_id: str = ""
    timeout: int = 30
    default_page_size: int = 100
    cache: Optional[Any] = field(default_factory=_default_cache)

    def validate(self) -> None:
        """Check that the settings are usable.

        Raises:
            InvalidCredentialsError: If api_token is empty
            ConfigError: If a numeric setting is below 1 or cache is unusable
        """
        if not self.api_token or not str(self.api_token).strip():
            raise InvalidCredentialsError()

        if self.timeout < 1:
            raise ConfigError(
                f"must be at least 1, got {self.timeout}", 'timeout'
            )

        if not 1 <= self.default_page_size <= 100:
            raise ConfigError(
                f"must be between 1 and 100, got {self.default_page_size}",
                'default_page_size'
            )

        if self.cache is not None and not callable(getattr(self.cache, 'fetch', None)):
            raise ConfigError(
                "cache must provide a fetch(key, compute_fn) method", 'cache'
            )
