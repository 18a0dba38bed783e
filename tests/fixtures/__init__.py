"""Shared fixtures for notion-to-html unit tests.

This module provides builders for raw Notion API payloads: blocks of every
rendered type, rich text runs, block-children listings and database pages.
"""

from .notion_payloads import (
    PAGE_ID,
    DATABASE_ID,
    annotations,
    rich_text,
    block_data,
    image_block,
    external_image_block,
    children_listing,
    page_data,
    timestamp,
)

__all__ = [
    'PAGE_ID',
    'DATABASE_ID',
    'annotations',
    'rich_text',
    'block_data',
    'image_block',
    'external_image_block',
    'children_listing',
    'page_data',
    'timestamp',
]
