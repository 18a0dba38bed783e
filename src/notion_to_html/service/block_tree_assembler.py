"""Block tree assembly from Notion's flat block-children listings.

Notion returns the blocks of a page (or of a block) as a flat list and only
flags whether each block has nested content. This module walks those
listings depth first and links the results into Block trees:

- blocks with ``has_children`` get their nested blocks assembled recursively
  into ``children``
- consecutive numbered list items that share a parent are folded into the
  first item's ``siblings`` so the list renders as a single ``<ol>``
- media blocks whose hosted file URL has expired are re-fetched before use,
  since Notion's signed file URLs are only valid for about an hour
"""

import logging
from datetime import datetime, UTC
from typing import Any, Callable, Dict, List, Optional

from ..models.block import Block
from .errors import BlockDepthExceededError

logger = logging.getLogger(__name__)

# Maximum nesting depth before assembly is aborted
MAX_BLOCK_DEPTH = 50

# Block types folded into the preceding item's siblings
SIBLING_GROUPED_TYPES = ('numbered_list_item',)

# Block types whose payload may carry an expiring Notion-hosted file
MEDIA_BLOCK_TYPES = ('image', 'video', 'audio', 'file', 'pdf')


def _parse_timestamp(value: str) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


class BlockTreeAssembler:
    """Builds Block trees from paginated block-children listings.

    Example:
        >>> assembler = BlockTreeAssembler(api, MemoryCache())
        >>> blocks = assembler.assemble(page_id)
        >>> html = [block.render(options) for block in blocks]
    """

    def __init__(
        self,
        api: Any,
        cache: Any = None,
        max_depth: int = MAX_BLOCK_DEPTH,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """Initialize the assembler.

        Args:
            api: Object with ``fetch_block_children(id)`` and ``fetch_block(id)``
            cache: Read-through cache for children listings, or None
            max_depth: Deepest nesting level accepted
            clock: Returns the current aware datetime (defaults to UTC now)
        """
        self._api = api
        self._cache = cache
        self.max_depth = max_depth
        self._clock = clock or (lambda: datetime.now(UTC))

    def assemble(self, block_id: str) -> List[Block]:
        """Fetch and link every block under a page or block.

        Args:
            block_id: Page or block id whose children are assembled

        Returns:
            Root blocks in document order

        Raises:
            BlockDepthExceededError: If nesting exceeds max_depth
            NotionAPIError: Any fetch failure, propagated unchanged
        """
        return self._assemble(block_id, depth=0)

    def _assemble(self, block_id: str, depth: int) -> List[Block]:
        if depth > self.max_depth:
            logger.error(f"Block {block_id} is nested deeper than {self.max_depth} levels")
            raise BlockDepthExceededError(block_id, self.max_depth)

        listing = self._fetch_children(block_id)
        raw_blocks = listing.get('results', [])
        logger.debug(f"Assembling {len(raw_blocks)} blocks under {block_id} (depth {depth})")

        anchor_index: Optional[int] = None
        results: List[Block] = []

        for index, raw in enumerate(raw_blocks):
            if self.needs_refresh(raw):
                raw = self.refresh_block(raw['id'])

            block = Block.from_api(raw)
            if block.has_children:
                block.children = self._assemble(block.id, depth + 1)

            if block.type in SIBLING_GROUPED_TYPES:
                anchor = results[anchor_index] if anchor_index is not None else None
                is_sibling = (
                    anchor is not None
                    and index != anchor_index
                    and block.type == anchor.type
                    and block.parent == anchor.parent
                )
                if is_sibling:
                    anchor.siblings.append(block)
                    continue
                anchor_index = len(results)
            else:
                anchor_index = None

            results.append(block)

        return results

    def _fetch_children(self, block_id: str) -> Dict[str, Any]:
        if self._cache is None:
            return self._api.fetch_block_children(block_id)
        return self._cache.fetch(block_id, lambda: self._api.fetch_block_children(block_id))

    def needs_refresh(self, data: Dict[str, Any]) -> bool:
        """Check whether a raw block carries an expired Notion-hosted file.

        Only media blocks with ``type == 'file'`` have signed, expiring URLs.
        A missing or unparseable expiry time is treated as still valid.
        """
        block_type = data.get('type')
        if block_type not in MEDIA_BLOCK_TYPES:
            return False

        media = data.get(block_type) or {}
        if media.get('type') != 'file':
            return False

        expiry_time = _parse_timestamp((media.get('file') or {}).get('expiry_time'))
        if expiry_time is None:
            return False

        return expiry_time <= self._clock()

    def refresh_block(self, block_id: str) -> Dict[str, Any]:
        """Re-fetch a block directly from the API, bypassing the cache."""
        logger.info(f"Refreshing block {block_id} with an expired file URL")
        return self._api.fetch_block(block_id)
