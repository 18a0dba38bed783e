"""Default CSS classes and styling-option lookup.

Styling options are a plain mapping from block type to an option slice::

    {
        "paragraph": {"class": "text-lg"},
        "heading_1": {"class": "title", "override_class": True},
        "image": {"data": {"controller": "zoom"}},
    }

Each slice may carry ``class``, ``override_class``, ``data`` and, for code
blocks, ``language``.
"""

from typing import Any, Dict, Mapping, Optional

# Block types Block.render knows how to dispatch
BLOCK_TYPES = (
    'paragraph',
    'heading_1',
    'heading_2',
    'heading_3',
    'bulleted_list_item',
    'numbered_list_item',
    'quote',
    'callout',
    'code',
    'image',
    'embed',
    'video',
    'table_of_contents',
)

# Option keys that are not block types but still accept a slice
EXTRA_OPTION_KEYS = ('date',)

DEFAULT_CSS_CLASSES: Dict[str, str] = {
    'bulleted_list_item': 'list-disc list-inside break-words',
    'callout': 'flex flex-column p-4 rounded mt-4',
    'code': 'border-2 p-6 rounded w-full overflow-x-auto',
    'date': '',
    'heading_1': 'mb-4 mt-6 text-3xl font-semibold',
    'heading_2': 'mb-4 mt-6 text-2xl font-semibold',
    'heading_3': 'mb-2 mt-6 text-xl font-semibold',
    'image': '',
    'numbered_list_item': 'list-decimal list-inside break-words',
    'paragraph': '',
    'quote': 'border-l-4 border-black px-5 py-1',
    'video': 'w-full',
}


def options_for(options: Optional[Mapping[str, Any]], block_type: str) -> Dict[str, Any]:
    """Return the option slice for a block type, or an empty dict."""
    if not options:
        return {}
    return dict(options.get(block_type) or {})


def class_for(options: Optional[Mapping[str, Any]], block_type: str) -> Optional[str]:
    """Return the caller-supplied class for a block type, if any."""
    return options_for(options, block_type).get('class')


def data_for(options: Optional[Mapping[str, Any]], block_type: str) -> Optional[Dict[str, str]]:
    """Return the caller-supplied data attributes for a block type, if any."""
    return options_for(options, block_type).get('data')


def css_class_for(block_type: str, options: Optional[Mapping[str, Any]]) -> str:
    """Resolve the class attribute for an element of the given block type.

    With ``override_class`` set the caller's class replaces the default
    entirely; otherwise it is appended to the default.

    Args:
        block_type: Block type key into DEFAULT_CSS_CLASSES
        options: Option slice for this block type

    Returns:
        Space separated class string, possibly empty
    """
    options = options or {}
    if options.get('override_class'):
        return options.get('class') or ''
    return f"{DEFAULT_CSS_CLASSES.get(block_type, '')} {options.get('class') or ''}".strip()


def data_attributes(options: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Turn an option slice's ``data`` mapping into ``data-*`` attributes."""
    data = (options or {}).get('data') or {}
    return {
        f"data-{str(key).replace('_', '-')}": str(value)
        for key, value in data.items()
    }
