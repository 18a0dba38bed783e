"""Small helpers for building HTML elements with BeautifulSoup.

Elements are created detached from any document and serialized with
``str()``, which takes care of escaping text and attribute values.
"""

from typing import Dict, Iterable, Optional, Union

from bs4 import BeautifulSoup, Tag

# Factory document; new_tag never attaches the element to it
_FACTORY = BeautifulSoup('', 'html.parser')

Content = Union[Tag, str]


def element(
    name: str,
    content: Optional[Union[Content, Iterable[Content]]] = None,
    css_class: Optional[str] = None,
    attrs: Optional[Dict[str, str]] = None,
) -> Tag:
    """Create a detached element.

    Args:
        name: Tag name
        content: Text, an element, or an iterable of either, appended in order
        css_class: Class attribute; omitted when empty or None
        attrs: Additional attributes, written after ``class``

    Returns:
        The new Tag
    """
    all_attrs: Dict[str, str] = {}
    if css_class:
        all_attrs['class'] = css_class
    all_attrs.update(attrs or {})

    tag = _FACTORY.new_tag(name, attrs=all_attrs)
    append(tag, content)
    return tag


def append(parent: Tag, content: Optional[Union[Content, Iterable[Content]]]) -> Tag:
    """Append text or elements to parent, preserving order."""
    if content is None:
        return parent
    if isinstance(content, (str, Tag)):
        content = [content]
    for item in content:
        if isinstance(item, Tag):
            parent.append(item)
        else:
            parent.append(str(item))
    return parent


def to_html(elements: Iterable[Tag]) -> str:
    """Serialize a sequence of elements back to back."""
    return ''.join(str(el) for el in elements)
