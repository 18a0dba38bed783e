"""Unit tests for service.page_service module."""

from datetime import timedelta

import pytest
from unittest.mock import Mock, patch

from notion_to_html.models.page import Page
from notion_to_html.notion_api.config import NotionConfig
from notion_to_html.notion_api.errors import ObjectNotFoundError
from notion_to_html.service.cache import MemoryCache
from notion_to_html.service.page_service import NotionService
from tests.fixtures import (
    DATABASE_ID,
    PAGE_ID,
    block_data,
    children_listing,
    external_image_block,
    image_block,
    page_data,
)


def create_config(cache=None):
    return NotionConfig(api_token='secret_testtoken123', database_id=DATABASE_ID, cache=cache)


@pytest.fixture
def api():
    return Mock()


@pytest.fixture
def service(api):
    return NotionService(create_config(), api=api)


class TestConstruction:
    """Test cases for NotionService construction."""

    @patch('notion_to_html.service.page_service.NotionAPIWrapper')
    def test_builds_api_wrapper_from_config(self, wrapper_class):
        config = create_config()

        NotionService(config)

        wrapper_class.assert_called_once_with(config)

    def test_uses_config_cache(self, api):
        api.fetch_block_children.return_value = children_listing(block_data('p', 'paragraph'))
        service = NotionService(create_config(cache=MemoryCache()), api=api)

        service.get_blocks(PAGE_ID)
        service.get_blocks(PAGE_ID)

        api.fetch_block_children.assert_called_once_with(PAGE_ID)


class TestGetPages:
    """Test cases for NotionService.get_pages."""

    def test_queries_public_pages_newest_first(self, service, api):
        api.query_database.return_value = {'results': [page_data(), page_data(page_id='other')]}

        pages = service.get_pages()

        assert [p.id for p in pages] == [PAGE_ID, 'other']
        api.query_database.assert_called_once_with(
            filter={'and': [{'property': 'public', 'checkbox': {'equals': True}}]},
            sorts=[{'property': 'published', 'direction': 'descending'}],
            page_size=10,
        )

    def test_passes_search_arguments(self, service, api):
        api.query_database.return_value = {'results': []}

        service.get_pages(tag='python', slug='intro', page_size=3)

        kwargs = api.query_database.call_args.kwargs
        assert kwargs['filter'] == {'and': NotionService.default_query(tag='python', slug='intro')}
        assert kwargs['page_size'] == 3

    def test_empty_result(self, service, api):
        api.query_database.return_value = {'results': []}

        assert service.get_pages() == []

    def test_metadata_is_rendered_from_properties(self, service, api):
        api.query_database.return_value = {'results': [page_data(title='Hello')]}

        page = service.get_pages()[0]

        assert page.formatted_title({'class': 't', 'override_class': True}) == '<h1 class="t"><span>Hello</span></h1>'


class TestGetPage:
    """Test cases for NotionService.get_page."""

    def test_fetches_metadata_and_blocks(self, service, api):
        api.fetch_page.return_value = page_data()
        api.fetch_block_children.return_value = children_listing(
            block_data('p', 'paragraph'),
            block_data('h', 'heading_2'),
        )

        page = service.get_page(PAGE_ID)

        assert isinstance(page, Page)
        assert page.metadata.id == PAGE_ID
        assert [b.id for b in page.blocks] == ['p', 'h']
        api.fetch_page.assert_called_once_with(PAGE_ID)
        api.fetch_block_children.assert_called_once_with(PAGE_ID)

    def test_rendered_page(self, service, api):
        api.fetch_page.return_value = page_data()
        api.fetch_block_children.return_value = children_listing(block_data('Hello', 'paragraph'))

        page = service.get_page(PAGE_ID)

        assert page.formatted_blocks({'paragraph': {'class': 'my-2'}}) == [
            '<p class="my-2"><span>Hello</span></p>'
        ]
        assert page.formatted_published_at() == '<p>July 13, 2023</p>'

    def test_missing_page_propagates(self, service, api):
        api.fetch_page.side_effect = ObjectNotFoundError(PAGE_ID)

        with pytest.raises(ObjectNotFoundError):
            service.get_page(PAGE_ID)

        api.fetch_block_children.assert_not_called()


class TestRefresh:
    """Test cases for expired media detection and block refresh."""

    def test_expired_image_needs_refresh(self, service):
        assert service.refresh_image(image_block('i', expires_in=timedelta(minutes=-5))) is True

    def test_valid_image_does_not_need_refresh(self, service):
        assert service.refresh_image(image_block('i', expires_in=timedelta(minutes=30))) is False

    def test_external_image_does_not_need_refresh(self, service):
        assert service.refresh_image(external_image_block('i')) is False

    def test_non_media_type_does_not_need_refresh(self, service):
        assert service.refresh_image({'type': 'text'}) is False

    def test_refresh_block_fetches_directly(self, service, api):
        api.fetch_block.return_value = image_block('i')

        assert service.refresh_block('i')['id'] == 'i'
        api.fetch_block.assert_called_once_with('i')
        api.fetch_block_children.assert_not_called()


class TestDefaults:
    """Test cases for the static query helpers."""

    def test_default_query(self):
        assert NotionService.default_query(name='x')[-1] == {'property': 'name', 'rich_text': {'contains': 'x'}}

    def test_default_sorting(self):
        assert NotionService.default_sorting()['direction'] == 'descending'
