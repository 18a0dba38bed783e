"""Data models for Notion blocks and pages."""

from .block import Block, UNSUPPORTED_BLOCK
from .page_metadata import PageMetadata
from .page import Page

__all__ = ['Block', 'UNSUPPORTED_BLOCK', 'PageMetadata', 'Page']
