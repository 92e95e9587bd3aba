"""
Filter Model Tests
"""

import pytest
from django.test import override_settings

from crud_utils.filter import EmptyData, Filter, Pagination, PartialMatchText, Range, SimpleFilter


class TestValueShapes:

    def test_range_bounds(self):
        value = Range(1, 5)

        assert value.get_from() == 1
        assert value.get_to() == 5
        assert not value.is_empty()
        assert Range().is_empty()

    def test_equality(self):
        assert Range(1, None) == Range(1, None)
        assert PartialMatchText('abc') == PartialMatchText('abc')
        assert EmptyData() == EmptyData()
        assert PartialMatchText('abc') != 'abc'


class TestPagination:

    def test_defaults_come_from_settings(self):
        pagination = Pagination()

        assert pagination.get_offset() == 0
        assert pagination.get_limit() == 10
        assert pagination.page == 1

    def test_from_page(self):
        pagination = Pagination.from_page(3, 20)

        assert pagination.get_offset() == 40
        assert pagination.get_limit() == 20
        assert pagination.page == 3

    def test_page_size_capped(self):
        assert Pagination.from_page(1, 500).get_limit() == 50

    @override_settings(CRUD_UTILS={'MAX_PAGE_SIZE': 5})
    def test_settings_change_is_picked_up(self):
        assert Pagination.from_page(1, 500).get_limit() == 5

    @pytest.mark.parametrize('offset, limit', [(-1, 10), (0, 0), (0, -5)])
    def test_invalid_window(self, offset, limit):
        with pytest.raises(ValueError):
            Pagination(offset, limit)

    def test_invalid_page(self):
        with pytest.raises(ValueError):
            Pagination.from_page(0)


class TestFilter:

    def test_base_filter_requires_criteria(self):
        with pytest.raises(NotImplementedError):
            Filter().get_filter()

    def test_simple_filter(self):
        criteria = {'status': 'draft'}
        simple = SimpleFilter(criteria, relationship_alias='author', collection_max_size=5)

        assert simple.get_filter() == criteria
        assert simple.get_relationship_alias() == 'author'
        assert simple.get_collection_max_size() == 5
        assert SimpleFilter().get_filter() == {}
