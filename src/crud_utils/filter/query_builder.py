"""
Filter Query Builder - translates a Filter into a Django queryset
Following Builder pattern: every setter returns the builder for chaining
"""

import datetime
import decimal
import logging
import uuid
from typing import Any, Optional

from django.db.models import Q, QuerySet

from ..order import Order
from .models import EmptyData, Filter, Pagination, PartialMatchText, Range

logger = logging.getLogger(__name__)

SCALAR_TYPES = (str, int, float, bool, decimal.Decimal, uuid.UUID)
DATE_TYPES = (datetime.datetime, datetime.date, datetime.time)


class QueryBuilder:
    """
    Builds a filtered, ordered and paginated queryset for a repository

        builder = QueryBuilder(repository).set_filter(filter).set_order(order)
        items = builder.set_pagination(pagination).get_query()
        total = builder.get_total_size()
    """

    def __init__(self, repository):
        self.repository = repository
        self.queryset: Optional[QuerySet] = None
        self.offset: Optional[int] = None
        self.limit: Optional[int] = None

    @staticmethod
    def create_lookup(key: str, alias: Optional[str] = None) -> str:
        """
        Dotted paths traverse relations: "author.name" -> "author__name"

        ``alias`` is a relation path prepended to the key ("author" turns
        "name" into "author__name"), so the filter applies to a related
        model. Querysets have no root alias to name; pass None to filter
        the repository's own model.
        """
        path = key.replace('.', '__')
        if alias:
            return f'{alias}__{path}'
        return path

    def create_condition(self, key: str, value: Any, alias: Optional[str] = None) -> Optional[Q]:
        """Condition for one criterion, or None when the value shape is not supported"""
        lookup = self.create_lookup(key, alias)

        # String, numeric, bool
        if isinstance(value, SCALAR_TYPES):
            return Q(**{lookup: value})

        # Date and time
        if isinstance(value, DATE_TYPES):
            return Q(**{lookup: value})

        if isinstance(value, Range):
            condition = Q()
            if value.get_from() is not None:
                condition &= Q(**{f'{lookup}__gte': value.get_from()})
            if value.get_to() is not None:
                condition &= Q(**{f'{lookup}__lte': value.get_to()})
            return condition

        # LIKE %text%, wildcards in the text itself are escaped by the ORM
        if isinstance(value, PartialMatchText):
            return Q(**{f'{lookup}__contains': value.get_text()})

        if isinstance(value, EmptyData):
            return Q(**{f'{lookup}__isnull': True})

        logger.debug(f"Skipping filter on '{key}': unsupported value {value!r}")
        return None

    def _require_queryset(self) -> QuerySet:
        if self.queryset is None:
            raise RuntimeError('QueryBuilder.set_filter() must be called first')
        return self.queryset

    def set_filter(self, filter: Filter) -> 'QueryBuilder':
        self.queryset = self.repository.create_queryset()
        self.offset = None
        self.limit = None

        alias = filter.get_relationship_alias()
        for key, value in filter.get_filter().items():
            condition = self.create_condition(key, value, alias)
            if condition:
                self.queryset = self.queryset.filter(condition)

        self.limit = filter.get_collection_max_size()
        logger.debug(f"Filter applied to {self.repository.model.__name__}: {sorted(filter.get_filter())}")
        return self

    def set_pagination(self, pagination: Pagination) -> 'QueryBuilder':
        self._require_queryset()
        self.offset = pagination.get_offset()
        self.limit = pagination.get_limit()
        return self

    def set_order(self, order: Order) -> 'QueryBuilder':
        queryset = self._require_queryset()
        if not order:
            return self
        terms = list(queryset.query.order_by)
        for field, direction in order.get_order().items():
            path = self.create_lookup(field)
            terms.append(f'-{path}' if direction == 'DESC' else path)
        self.queryset = queryset.order_by(*terms)
        return self

    def get_query(self) -> QuerySet:
        queryset = self._require_queryset()
        start = self.offset or 0
        if self.limit is not None:
            return queryset[start:start + self.limit]
        if start:
            return queryset[start:]
        return queryset

    def get_total_size(self) -> int:
        """Size of the filtered result set, ignoring ordering and offset/limit"""
        return self._require_queryset().order_by().count()
