"""
Dynamic query filtering: value shapes, filters and the query builder
"""

from .models import EmptyData, Filter, Pagination, PartialMatchText, Range, SimpleFilter
from .query_builder import QueryBuilder

__all__ = [
    'EmptyData',
    'Filter',
    'Pagination',
    'PartialMatchText',
    'Range',
    'SimpleFilter',
    'QueryBuilder',
]
