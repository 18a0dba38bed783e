"""Render Notion pages and blocks to Tailwind-styled HTML.

Example:
    >>> from notion_to_html import NotionConfig, NotionService
    >>> service = NotionService(NotionConfig(api_token=token, database_id=db))
    >>> page = service.get_page(service.get_pages(tag="python")[0].id)
    >>> page.formatted_title()
    '<h1 class="mb-4 mt-6 text-3xl font-semibold"><span>Hello</span></h1>'
"""

from .models import Block, Page, PageMetadata
from .notion_api import (
    NotionConfig,
    NotionAPIWrapper,
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
from .renderers import RenderOptionsLoader
from .service import (
    BlockTreeAssembler,
    BlockDepthExceededError,
    CacheError,
    FileCache,
    MemoryCache,
    NotionService,
)

__all__ = [
    'Block',
    'Page',
    'PageMetadata',
    'NotionConfig',
    'NotionAPIWrapper',
    'NotionToHtmlError',
    'NotionAPIError',
    'InvalidCredentialsError',
    'ObjectNotFoundError',
    'RateLimitedError',
    'APIUnreachableError',
    'APIAccessError',
    'ConfigError',
    'FilesystemError',
    'RenderOptionsLoader',
    'BlockTreeAssembler',
    'BlockDepthExceededError',
    'CacheError',
    'FileCache',
    'MemoryCache',
    'NotionService',
]
