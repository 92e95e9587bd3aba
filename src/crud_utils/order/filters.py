"""
Ordering Filter - validates client ordering terms for CRUD viewsets
Built on DRF's OrderingFilter so only allowed fields reach order_by()
"""

from rest_framework.filters import OrderingFilter

from ..conf import crud_settings
from .models import Order


class CrudOrderingFilter(OrderingFilter):
    """
    Turns ``?ordering=-rating,title`` into an Order

    Terms are checked against the view's ``ordering_fields``; without them,
    against the readable fields of the view's serializer. Invalid terms are
    dropped and the view's ``ordering`` applies when none remain.
    """

    @property
    def ordering_param(self):
        return crud_settings.ORDERING_PARAM

    def get_default_valid_fields(self, queryset, view, context={}):
        if view.get_serializer_class() is None:
            return []
        return super().get_default_valid_fields(queryset, view, context)

    def get_order(self, request, queryset, view) -> Order:
        terms = self.get_ordering(request, queryset, view) or ()
        return Order.from_query_param(','.join(terms))
