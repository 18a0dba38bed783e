"""Service entry point for listing, fetching and assembling Notion pages.

NotionService ties the API wrapper, the block tree assembler and the models
together. It holds no global state: every setting comes from the
NotionConfig passed to the constructor.
"""

import logging
from typing import Any, Dict, List, Optional

from ..models.block import Block
from ..models.page import Page
from ..models.page_metadata import PageMetadata
from ..notion_api.api_wrapper import NotionAPIWrapper
from ..notion_api.config import NotionConfig
from . import query_builder
from .block_tree_assembler import BlockTreeAssembler

logger = logging.getLogger(__name__)


class NotionService:
    """Fetches pages from a Notion database and assembles their blocks.

    Example:
        >>> service = NotionService(NotionConfig(api_token=token, database_id=db))
        >>> pages = service.get_pages(tag="python")
        >>> page = service.get_page(pages[0].id)
        >>> html = "".join(page.formatted_blocks({"paragraph": {"class": "my-2"}}))
    """

    def __init__(self, config: NotionConfig, api: Optional[Any] = None):
        """Initialize the service.

        Args:
            config: Explicit Notion configuration
            api: API collaborator; defaults to a NotionAPIWrapper for config
        """
        self._config = config
        self._api = api if api is not None else NotionAPIWrapper(config)
        self._assembler = BlockTreeAssembler(self._api, config.cache)

    @staticmethod
    def default_query(
        name: Optional[str] = None,
        description: Optional[str] = None,
        tag: Optional[str] = None,
        slug: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return query_builder.default_query(name=name, description=description, tag=tag, slug=slug)

    @staticmethod
    def default_sorting() -> Dict[str, str]:
        return query_builder.default_sorting()

    def get_pages(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        tag: Optional[str] = None,
        slug: Optional[str] = None,
        page_size: int = 10
    ) -> List[PageMetadata]:
        """List public pages of the configured database, newest first.

        Args:
            name: Substring the page name must contain
            description: Substring the description must contain
            tag: Tag the page must carry
            slug: Exact slug the page must have
            page_size: Maximum number of pages returned

        Returns:
            Page metadata in query order

        Raises:
            NotionAPIError: If the query fails
        """
        response = self._api.query_database(
            filter={'and': self.default_query(name=name, description=description, tag=tag, slug=slug)},
            sorts=[self.default_sorting()],
            page_size=page_size,
        )
        pages = [PageMetadata.from_api(page) for page in response.get('results', [])]
        logger.debug(f"Database query returned {len(pages)} pages")
        return pages

    def get_page(self, page_id: str) -> Page:
        """Fetch a page's metadata and its assembled blocks.

        Raises:
            NotionAPIError: If any fetch fails
            BlockDepthExceededError: If the page's blocks nest too deeply
        """
        logger.info(f"Fetching page {page_id}")
        metadata = PageMetadata.from_api(self._api.fetch_page(page_id))
        blocks = self.get_blocks(page_id)
        return Page(metadata=metadata, blocks=blocks)

    def get_blocks(self, block_id: str) -> List[Block]:
        """Assemble the block tree under a page or block."""
        return self._assembler.assemble(block_id)

    def refresh_image(self, data: Dict[str, Any]) -> bool:
        """Whether a raw block's hosted file URL has expired."""
        return self._assembler.needs_refresh(data)

    def refresh_block(self, block_id: str) -> Dict[str, Any]:
        """Re-fetch a raw block, bypassing the cache."""
        return self._assembler.refresh_block(block_id)
