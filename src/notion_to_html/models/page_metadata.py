"""Notion page metadata model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..renderers.block_renderers import render_date, render_heading_1, render_paragraph


@dataclass
class PageMetadata:
    """A database page's attributes, without its content blocks.

    The blog-style fields (tags, title, slug, published_at, description) are
    read from the database properties named ``tags``, ``name``, ``slug``,
    ``published`` and ``description``; each is None when the property is
    missing.

    Attributes:
        id: Page id
        created_time: ISO 8601 creation timestamp
        last_edited_time: ISO 8601 last edit timestamp
        created_by: Raw user reference
        last_edited_by: Raw user reference
        cover: Raw cover object
        icon: Raw icon object
        parent: Raw parent reference (usually a database)
        archived: Whether the page is archived
        properties: Raw database properties
        url: Public Notion URL of the page
    """
    id: str
    created_time: Optional[str] = None
    last_edited_time: Optional[str] = None
    created_by: Optional[Dict[str, Any]] = None
    last_edited_by: Optional[Dict[str, Any]] = None
    cover: Optional[Dict[str, Any]] = None
    icon: Optional[Dict[str, Any]] = None
    parent: Optional[Dict[str, Any]] = None
    archived: bool = False
    properties: Dict[str, Any] = field(default_factory=dict)
    url: Optional[str] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'PageMetadata':
        """Build page metadata from a raw Notion page object."""
        return cls(
            id=data.get('id', ''),
            created_time=data.get('created_time'),
            last_edited_time=data.get('last_edited_time'),
            created_by=data.get('created_by'),
            last_edited_by=data.get('last_edited_by'),
            cover=data.get('cover'),
            icon=data.get('icon'),
            parent=data.get('parent'),
            archived=bool(data.get('archived', False)),
            properties=data.get('properties') or {},
            url=data.get('url'),
        )

    def _property(self, name: str, key: str) -> Any:
        prop = self.properties.get(name)
        if not isinstance(prop, dict):
            return None
        return prop.get(key)

    @property
    def tags(self) -> Optional[Dict[str, Any]]:
        return self.properties.get('tags')

    @property
    def title(self) -> Optional[List[Dict[str, Any]]]:
        return self._property('name', 'title')

    @property
    def slug(self) -> Optional[Dict[str, Any]]:
        return self.properties.get('slug')

    @property
    def published_at(self) -> Optional[str]:
        date = self._property('published', 'date')
        if not isinstance(date, dict):
            return None
        return date.get('start')

    @property
    def description(self) -> Optional[List[Dict[str, Any]]]:
        return self._property('description', 'rich_text')

    def formatted_title(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """Render the title as a heading 1."""
        return render_heading_1(self.title or [], options)

    def formatted_description(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """Render the description as a paragraph."""
        return render_paragraph(self.description or [], options)

    def formatted_published_at(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """Render the publication date, e.g. ``<p>July 13, 2023</p>``."""
        return render_date(self.published_at, options)
