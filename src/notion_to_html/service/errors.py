"""Exceptions raised while assembling block trees and caching API responses."""

from ..notion_api.errors import NotionToHtmlError


class BlockDepthExceededError(NotionToHtmlError):
    """Raised when blocks are nested deeper than the assembler allows."""

    def __init__(self, block_id: str, max_depth: int):
        super().__init__(
            f"Block {block_id} exceeds maximum nesting depth of {max_depth}"
        )
        self.block_id = block_id
        self.max_depth = max_depth


class CacheError(NotionToHtmlError):
    """Raised when a cache entry cannot be read or written."""

    def __init__(self, cache_path: str, message: str):
        super().__init__(f"Cache error at {cache_path}: {message}")
        self.cache_path = cache_path
        self.message = message
