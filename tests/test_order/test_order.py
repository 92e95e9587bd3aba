"""
Order Model Tests
"""

import pytest

from crud_utils.order import ASC, DESC, Order


class TestOrder:

    def test_keeps_mapping_order_and_normalizes_direction(self):
        order = Order({'rating': 'desc', 'title': 'Asc'})

        assert list(order.get_order().items()) == [('rating', DESC), ('title', ASC)]

    def test_invalid_direction(self):
        with pytest.raises(ValueError):
            Order({'title': 'sideways'})

    def test_from_query_param(self):
        order = Order.from_query_param('-published_at, title,,')

        assert list(order.get_order().items()) == [('published_at', DESC), ('title', ASC)]

    def test_from_query_param_drops_unknown_fields(self):
        order = Order.from_query_param('-password,title', allowed_fields=['title'])

        assert dict(order.get_order()) == {'title': ASC}

    def test_empty(self):
        assert not Order.from_query_param(None)
        assert not Order.from_query_param('')

    def test_bare_minus_is_skipped(self):
        assert dict(Order.from_query_param('-,--,title').get_order()) == {'title': ASC}
