"""Notion block data model."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..renderers import block_renderers as renderers
from ..renderers.css import options_for

logger = logging.getLogger(__name__)

UNSUPPORTED_BLOCK = 'Unsupported block'

# (url, expiry_time, caption, source_kind)
MultiMedia = Tuple[Optional[str], Optional[str], List[Dict[str, Any]], Optional[str]]


@dataclass
class Block:
    """One Notion block and, once assembled, its nested content.

    ``children`` holds blocks nested under this one; ``siblings`` holds the
    list items that follow this one in the same list. Both are filled in by
    BlockTreeAssembler and are empty for a freshly constructed block.

    Attributes:
        id: Block id
        type: Notion block type (e.g. "paragraph", "heading_1")
        properties: The type-specific payload, ``data[type]``
        created_time: ISO 8601 creation timestamp
        last_edited_time: ISO 8601 last edit timestamp
        created_by: Raw user reference
        last_edited_by: Raw user reference
        parent: Raw parent reference (page or block)
        archived: Whether the block is archived
        has_children: Whether Notion reports nested blocks
    """
    id: str
    type: str
    properties: Dict[str, Any] = field(default_factory=dict)
    created_time: Optional[str] = None
    last_edited_time: Optional[str] = None
    created_by: Optional[Dict[str, Any]] = None
    last_edited_by: Optional[Dict[str, Any]] = None
    parent: Optional[Dict[str, Any]] = None
    archived: bool = False
    has_children: bool = False
    children: List['Block'] = field(default_factory=list)
    siblings: List['Block'] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'Block':
        """Build a Block from a raw Notion block object."""
        block_type = data.get('type') or ''
        return cls(
            id=data.get('id', ''),
            type=block_type,
            properties=data.get(block_type) or {},
            created_time=data.get('created_time'),
            last_edited_time=data.get('last_edited_time'),
            created_by=data.get('created_by'),
            last_edited_by=data.get('last_edited_by'),
            parent=data.get('parent'),
            archived=bool(data.get('archived', False)),
            has_children=bool(data.get('has_children', False)),
        )

    @property
    def rich_text(self) -> List[Dict[str, Any]]:
        return self.properties.get('rich_text') or []

    @property
    def icon(self) -> Any:
        """The icon's value for its own type (emoji string or file dict), or []."""
        icon = self.properties.get('icon') or {}
        return icon.get(icon.get('type')) or []

    @property
    def multi_media(self) -> MultiMedia:
        """Resolve the media payload of image, video and embed blocks.

        An uploaded ``file`` wins over an ``external`` link, which wins over a
        bare ``url`` (as used by embeds).
        """
        caption = self.properties.get('caption') or []

        file_ = self.properties.get('file')
        if isinstance(file_, dict):
            return file_.get('url'), file_.get('expiry_time'), caption, 'file'

        external = self.properties.get('external')
        if isinstance(external, dict):
            return external.get('url'), None, caption, 'external'

        return self.properties.get('url'), None, caption, None

    def render(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """Render the block to HTML.

        Args:
            options: Styling options keyed by block type

        Returns:
            HTML string; unsupported block types render a placeholder
        """
        block_options = options_for(options, self.type)

        if self.type == 'paragraph':
            return renderers.render_paragraph(self.rich_text, block_options)
        if self.type == 'heading_1':
            return renderers.render_heading_1(self.rich_text, block_options)
        if self.type == 'heading_2':
            return renderers.render_heading_2(self.rich_text, block_options)
        if self.type == 'heading_3':
            return renderers.render_heading_3(self.rich_text, block_options)
        if self.type == 'table_of_contents':
            return renderers.render_table_of_contents(block_options)
        if self.type == 'bulleted_list_item':
            return renderers.render_bulleted_list_item(
                self.rich_text, self.siblings, self.children, 0, block_options
            )
        if self.type == 'numbered_list_item':
            return renderers.render_numbered_list_item(
                self.rich_text, self.siblings, self.children, 0, block_options
            )
        if self.type == 'quote':
            return renderers.render_quote(self.rich_text, block_options)
        if self.type == 'callout':
            return renderers.render_callout(self.rich_text, self.icon, block_options)
        if self.type == 'code':
            language = self.properties.get('language') or block_options.get('language')
            return renderers.render_code(self.rich_text, {**block_options, 'language': language})
        if self.type in ('image', 'embed'):
            return renderers.render_image(*self.multi_media, options_for(options, 'image'))
        if self.type == 'video':
            return renderers.render_video(*self.multi_media, block_options)

        logger.warning(f"Unsupported block type '{self.type}' for block {self.id}")
        return UNSUPPORTED_BLOCK
