"""Block renderers: one function per Notion block type.

Every renderer takes the block's content plus the option slice for its type
and returns an HTML string. Classes are resolved with css_class_for, so a
caller can either extend or fully override the default Tailwind classes.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from bs4 import Tag

from .css import css_class_for, data_attributes
from .markup import element
from .text_renderer import text_elements

Options = Optional[Mapping[str, Any]]
RichText = Sequence[Dict[str, Any]]

LIST_TAGS = {
    'bulleted_list_item': 'ul',
    'numbered_list_item': 'ol',
}

# English month names, independent of the process locale
MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)


def _block_element(tag_name: str, block_type: str, rich_text: RichText, options: Options) -> Tag:
    return element(
        tag_name,
        text_elements(rich_text),
        css_class=css_class_for(block_type, options),
        attrs=data_attributes(options),
    )


def render_paragraph(rich_text: RichText, options: Options = None) -> str:
    return str(_block_element('p', 'paragraph', rich_text, options))


def render_heading_1(rich_text: RichText, options: Options = None) -> str:
    return str(_block_element('h1', 'heading_1', rich_text, options))


def render_heading_2(rich_text: RichText, options: Options = None) -> str:
    return str(_block_element('h2', 'heading_2', rich_text, options))


def render_heading_3(rich_text: RichText, options: Options = None) -> str:
    return str(_block_element('h3', 'heading_3', rich_text, options))


def render_quote(rich_text: RichText, options: Options = None) -> str:
    paragraph = element('p', text_elements(rich_text), css_class=css_class_for('quote', options))
    return str(element('div', element('cite', paragraph), attrs=data_attributes(options)))


def render_callout(rich_text: RichText, icon: Any, options: Options = None) -> str:
    """Render a callout with its icon to the left of the text.

    Args:
        rich_text: Callout text
        icon: Emoji string, a file/external dict with a ``url``, or empty
        options: Option slice for ``callout``
    """
    if isinstance(icon, dict) and icon.get('url'):
        icon_content: Any = element('img', attrs={'src': icon['url'], 'alt': ''})
    elif isinstance(icon, str):
        icon_content = icon
    else:
        icon_content = None

    return str(element(
        'div',
        [element('span', icon_content, css_class='mr-4'), element('div', text_elements(rich_text))],
        css_class=css_class_for('callout', options),
        attrs=data_attributes(options),
    ))


def render_code(rich_text: RichText, options: Options = None) -> str:
    """Render a code block wrapped for client-side highlighting.

    The ``language`` option becomes a ``language-<lang>`` class on ``<pre>``.
    """
    options = options or {}
    language = str(options.get('language') or '').replace(' ', '-')
    pre_class = css_class_for('code', options)
    if language:
        pre_class = f"{pre_class} language-{language}".strip()

    pre = element('pre', text_elements(rich_text, options), css_class=pre_class, attrs=data_attributes(options))
    source = element('div', pre, attrs={'data-highlight-target': 'source'})
    return str(element('div', source, attrs={'data-controller': 'highlight'}))


def format_long_date(value: Union[str, date, datetime]) -> str:
    """Format a date as e.g. ``July 13, 2023``.

    Accepts ISO strings (date only or full timestamp), dates and datetimes.
    """
    if isinstance(value, datetime):
        day = value.date()
    elif isinstance(value, date):
        day = value
    else:
        day = date.fromisoformat(str(value)[:10])
    return f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def render_date(value: Optional[Union[str, date, datetime]], options: Options = None) -> str:
    # TODO: render end dates and time zones from the full date property
    text = format_long_date(value) if value else None
    return str(element('p', text, css_class=css_class_for('date', options)))


def render_image(
    src: Optional[str],
    expiry_time: Optional[str],
    caption: Optional[RichText],
    media_type: Optional[str],
    options: Options = None
) -> str:
    content = [
        element('img', attrs={'src': src or '', 'alt': ''}),
        element('figcaption', text_elements(caption or [])),
    ]
    return str(element('figure', content, css_class=css_class_for('image', options), attrs=data_attributes(options)))


def render_video(
    src: Optional[str],
    expiry_time: Optional[str],
    caption: Optional[RichText],
    media_type: Optional[str],
    options: Options = None
) -> str:
    """Render a video as a native player or an embedded frame.

    Uploaded files (``media_type == 'file'``) get a ``<video>`` element;
    anything else is embedded in an ``<iframe>`` with ``aspect-video``.
    """
    options = dict(options or {})
    if media_type == 'file':
        player = element(
            'video',
            css_class=css_class_for('video', options),
            attrs={'controls': '', 'src': src or ''},
        )
    else:
        frame_options = {**options, 'class': f"{options.get('class') or ''} aspect-video".strip()}
        player = element(
            'iframe',
            css_class=css_class_for('video', frame_options),
            attrs={'src': src or '', 'allowfullscreen': ''},
        )

    content = [player, element('figcaption', text_elements(caption or []))]
    return str(element('figure', content, css_class=css_class_for('video', options), attrs=data_attributes(options)))


def render_table_of_contents(options: Options = None) -> str:
    return str(element('p', 'Table of Contents', css_class=css_class_for('table_of_contents', options)))


def _list_items(
    list_type: str,
    rich_text: RichText,
    siblings: Sequence[Any],
    children: Sequence[Any],
    depth: int,
    options: Options
) -> List[Tag]:
    """Build the ``<li>`` for one item, its nested lists, then its siblings.

    Children are rendered as nested lists of the same list type one level
    deeper; siblings are rendered as further items at the same depth.
    """
    options = options or {}
    indent = f"{options.get('class') or ''} ml-{depth * 2}".strip()
    items = [element('li', text_elements(rich_text), css_class=indent)]

    for child in children or []:
        items.append(_list_element(
            list_type, child.rich_text, child.siblings, child.children, depth + 1, options, outermost=False
        ))

    for sibling in siblings or []:
        items.extend(_list_items(list_type, sibling.rich_text, sibling.siblings, sibling.children, depth, options))

    return items


def _list_element(
    list_type: str,
    rich_text: RichText,
    siblings: Sequence[Any],
    children: Sequence[Any],
    depth: int,
    options: Options,
    outermost: bool = True
) -> Tag:
    # data-* attributes go on the outermost list only
    return element(
        LIST_TAGS[list_type],
        _list_items(list_type, rich_text, siblings, children, depth, options),
        css_class=css_class_for(list_type, options),
        attrs=data_attributes(options) if outermost else None,
    )


def render_bulleted_list_item(
    rich_text: RichText,
    siblings: Sequence[Any],
    children: Sequence[Any],
    depth: int = 0,
    options: Options = None
) -> str:
    """Render a bulleted list item with its nested children and siblings.

    Args:
        rich_text: Text of the item
        siblings: Blocks following this item in the same list
        children: Blocks nested under this item
        depth: Nesting depth, drives the ``ml-<2*depth>`` indent class
        options: Option slice for ``bulleted_list_item``
    """
    return str(_list_element('bulleted_list_item', rich_text, siblings, children, depth, options))


def render_numbered_list_item(
    rich_text: RichText,
    siblings: Sequence[Any],
    children: Sequence[Any],
    depth: int = 0,
    options: Options = None
) -> str:
    """Render a numbered list item; see render_bulleted_list_item."""
    return str(_list_element('numbered_list_item', rich_text, siblings, children, depth, options))
