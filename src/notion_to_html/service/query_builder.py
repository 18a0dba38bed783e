"""Database query filters and sorts for listing published pages.

The database is expected to follow a blog-like schema: a ``public`` checkbox,
``name`` title, ``description`` and ``slug`` rich text, ``tags`` multi-select
and a ``published`` date.
"""

from typing import Any, Dict, List, Optional


def default_query(
    name: Optional[str] = None,
    description: Optional[str] = None,
    tag: Optional[str] = None,
    slug: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Build the list of conditions AND-ed together when querying pages.

    Only public pages are returned. Each supplied argument appends one more
    condition, in the order slug, name, description, tag.

    Args:
        name: Substring the page name must contain
        description: Substring the description must contain
        tag: Tag the page must carry
        slug: Exact slug the page must have

    Returns:
        Ordered list of Notion property filter conditions
    """
    query: List[Dict[str, Any]] = [
        {'property': 'public', 'checkbox': {'equals': True}},
    ]

    if slug:
        query.append({'property': 'slug', 'rich_text': {'equals': slug}})

    if name:
        query.append({'property': 'name', 'rich_text': {'contains': name}})

    if description:
        query.append({'property': 'description', 'rich_text': {'contains': description}})

    if tag:
        query.append({'property': 'tags', 'multi_select': {'contains': tag}})

    return query


def default_sorting() -> Dict[str, str]:
    """Newest published pages first."""
    return {'property': 'published', 'direction': 'descending'}
