"""Rich text rendering.

Turns a Notion rich text array into inline HTML: one ``<a>`` or ``<span>``
per text run, with annotation classes derived from the run's annotations.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from bs4 import Tag

from .markup import element, to_html

# Annotation name -> class, in the order classes are emitted
ANNOTATION_CLASSES = (
    ('bold', 'font-bold'),
    ('italic', 'italic'),
    ('strikethrough', 'line-through'),
    ('underline', 'underline'),
    ('code', 'inline-code'),
)


def annotation_to_css_class(annotations: Optional[Mapping[str, Any]]) -> str:
    """Convert text annotations to a space separated class string.

    Colors other than ``default`` map to ``text-<color>-600``.

    Args:
        annotations: Notion annotations object

    Returns:
        Class string, empty when nothing is annotated
    """
    annotations = annotations or {}
    classes = [css for name, css in ANNOTATION_CLASSES if annotations.get(name)]

    color = annotations.get('color')
    if color and color != 'default':
        classes.append(f"text-{color}-600")

    return ' '.join(classes)


def _join_classes(*parts: Optional[str]) -> str:
    return ' '.join(part for part in parts if part)


def text_elements(rich_text: Iterable[Dict[str, Any]], options: Optional[Mapping[str, Any]] = None) -> List[Tag]:
    """Build one inline element per text run.

    Args:
        rich_text: Notion rich text array
        options: Option slice; only ``class`` is used

    Returns:
        List of detached ``<a>``/``<span>`` elements
    """
    extra_class = (options or {}).get('class')
    elements = []

    for run in rich_text or []:
        text = run.get('plain_text', '')
        classes = annotation_to_css_class(run.get('annotations'))
        href = run.get('href')

        if href:
            elements.append(element(
                'a', text,
                css_class=_join_classes('link', classes, extra_class),
                attrs={'href': href},
            ))
        elif classes:
            elements.append(element('span', text, css_class=_join_classes(classes, extra_class)))
        else:
            elements.append(element('span', text, css_class=extra_class))

    return elements


def text_renderer(rich_text: Iterable[Dict[str, Any]], options: Optional[Mapping[str, Any]] = None) -> str:
    """Render a rich text array to an HTML string."""
    return to_html(text_elements(rich_text, options))
