"""Builders for raw Notion API payloads used across unit tests.

The shapes follow the Notion REST API (version 2022-06-28): block objects
carry their type-specific payload under a key named after their type, and
page objects carry database properties under ``properties``.
"""

from datetime import datetime, timedelta, UTC

PAGE_ID = "0f3c0e4b-9b8a-4f7c-8d1e-2a3b4c5d6e7f"
DATABASE_ID = "a1b2c3d4e5f60718293a4b5c6d7e8f90"

DEFAULT_ANNOTATIONS = {
    'bold': False,
    'italic': False,
    'strikethrough': False,
    'underline': False,
    'code': False,
    'color': 'default',
}


def annotations(**overrides):
    """Default annotations with selected styles switched on."""
    return {**DEFAULT_ANNOTATIONS, **overrides}


def rich_text(text, href=None, **styles):
    """A single-run rich text array."""
    return [{
        'type': 'text',
        'text': {'content': text, 'link': {'url': href} if href else None},
        'plain_text': text,
        'href': href,
        'annotations': annotations(**styles),
    }]


def block_data(block_id, block_type, payload=None, parent_id=PAGE_ID, has_children=False):
    """A raw block object of the given type."""
    return {
        'object': 'block',
        'id': block_id,
        'created_time': '2024-01-01T00:00:00.000Z',
        'last_edited_time': '2024-01-02T00:00:00.000Z',
        'created_by': {'object': 'user', 'id': 'user1'},
        'last_edited_by': {'object': 'user', 'id': 'user2'},
        'parent': {'type': 'page_id', 'page_id': parent_id},
        'archived': False,
        'has_children': has_children,
        'type': block_type,
        block_type: payload if payload is not None else {'rich_text': rich_text(block_id)},
    }


def timestamp(delta):
    """ISO 8601 timestamp relative to now, in Notion's format."""
    return (datetime.now(UTC) + delta).strftime('%Y-%m-%dT%H:%M:%S.000Z')


def image_block(block_id, expires_in=timedelta(hours=1), url='https://files.example.com/pic.png'):
    """An uploaded image whose signed URL expires after ``expires_in``."""
    return block_data(block_id, 'image', {
        'type': 'file',
        'file': {'url': url, 'expiry_time': timestamp(expires_in)},
        'caption': rich_text('A caption'),
    })


def external_image_block(block_id, url='https://cdn.example.com/pic.png'):
    return block_data(block_id, 'image', {
        'type': 'external',
        'external': {'url': url},
        'caption': [],
    })


def children_listing(*blocks):
    """A block-children response containing the given blocks."""
    return {'object': 'list', 'results': list(blocks), 'next_cursor': None, 'has_more': False}


def page_data(page_id=PAGE_ID, title='My Page Title', description='Page description',
              published='2023-07-13', slug='my-page', tags=('python',)):
    """A raw database page following the blog schema."""
    return {
        'object': 'page',
        'id': page_id,
        'created_time': '2023-07-01T00:00:00.000Z',
        'last_edited_time': '2023-07-14T00:00:00.000Z',
        'created_by': {'object': 'user', 'id': 'user1'},
        'last_edited_by': {'object': 'user', 'id': 'user2'},
        'cover': None,
        'icon': {'type': 'emoji', 'emoji': '📝'},
        'parent': {'type': 'database_id', 'database_id': DATABASE_ID},
        'archived': False,
        'url': f"https://www.notion.so/{page_id.replace('-', '')}",
        'properties': {
            'public': {'type': 'checkbox', 'checkbox': True},
            'name': {'type': 'title', 'title': rich_text(title)},
            'description': {'type': 'rich_text', 'rich_text': rich_text(description)},
            'slug': {'type': 'rich_text', 'rich_text': rich_text(slug)},
            'published': {'type': 'date', 'date': {'start': published, 'end': None, 'time_zone': None}},
            'tags': {
                'type': 'multi_select',
                'multi_select': [{'name': tag, 'color': 'blue'} for tag in tags],
            },
        },
    }
