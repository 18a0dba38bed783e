"""Page service, block tree assembly and response caching."""

from .block_tree_assembler import BlockTreeAssembler, MAX_BLOCK_DEPTH
from .cache import FileCache, MemoryCache
from .errors import BlockDepthExceededError, CacheError
from .page_service import NotionService
from .query_builder import default_query, default_sorting

__all__ = [
    'BlockTreeAssembler',
    'MAX_BLOCK_DEPTH',
    'FileCache',
    'MemoryCache',
    'BlockDepthExceededError',
    'CacheError',
    'NotionService',
    'default_query',
    'default_sorting',
]
