"""Notion page model: metadata plus its content blocks."""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from .block import Block
from .page_metadata import PageMetadata


@dataclass(frozen=True)
class Page:
    """A page's metadata paired with its assembled root blocks.

    Attributes:
        metadata: Page attributes (title, description, published date, ...)
        blocks: Root-level blocks in page order
    """
    metadata: PageMetadata
    blocks: Tuple[Block, ...]

    def __post_init__(self):
        object.__setattr__(self, 'blocks', tuple(self.blocks))

    def formatted_title(self, options: Optional[Mapping[str, Any]] = None) -> str:
        return self.metadata.formatted_title(options)

    def formatted_description(self, options: Optional[Mapping[str, Any]] = None) -> str:
        return self.metadata.formatted_description(options)

    def formatted_published_at(self, options: Optional[Mapping[str, Any]] = None) -> str:
        return self.metadata.formatted_published_at(options)

    def formatted_blocks(self, options: Optional[Mapping[str, Any]] = None) -> List[str]:
        """Render every root block, in order.

        A failure while rendering any block propagates and no partial list is
        returned.
        """
        options = options or {}
        return [block.render(options) for block in self.blocks]
