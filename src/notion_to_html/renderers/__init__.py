"""HTML renderers for Notion blocks and rich text.

Markup is built with BeautifulSoup and styled with Tailwind classes that
callers can extend or override per block type.
"""

from .css import (
    BLOCK_TYPES,
    DEFAULT_CSS_CLASSES,
    class_for,
    css_class_for,
    data_for,
    options_for,
)
from .text_renderer import annotation_to_css_class, text_renderer
from .block_renderers import (
    format_long_date,
    render_bulleted_list_item,
    render_callout,
    render_code,
    render_date,
    render_heading_1,
    render_heading_2,
    render_heading_3,
    render_image,
    render_numbered_list_item,
    render_paragraph,
    render_quote,
    render_table_of_contents,
    render_video,
)
from .options_loader import RenderOptionsLoader

__all__ = [
    'BLOCK_TYPES',
    'DEFAULT_CSS_CLASSES',
    'class_for',
    'css_class_for',
    'data_for',
    'options_for',
    'annotation_to_css_class',
    'text_renderer',
    'format_long_date',
    'render_bulleted_list_item',
    'render_callout',
    'render_code',
    'render_date',
    'render_heading_1',
    'render_heading_2',
    'render_heading_3',
    'render_image',
    'render_numbered_list_item',
    'render_paragraph',
    'render_quote',
    'render_table_of_contents',
    'render_video',
    'RenderOptionsLoader',
]
