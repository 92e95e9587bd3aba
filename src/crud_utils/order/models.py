"""
Order Model - ordered mapping of field name to sort direction
"""

from collections import OrderedDict
from typing import Iterable, Mapping, Optional

ASC = 'ASC'
DESC = 'DESC'


class Order:
    """Caller-supplied ordering applied by the QueryBuilder"""

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        self._order = OrderedDict()
        for field, direction in (mapping or {}).items():
            self.add(field, direction)

    def add(self, field: str, direction: str = ASC) -> 'Order':
        normalized = str(direction).upper()
        if normalized not in (ASC, DESC):
            raise ValueError(f"Order direction for '{field}' must be ASC or DESC, got {direction!r}")
        self._order[field] = normalized
        return self

    def get_order(self) -> 'OrderedDict[str, str]':
        return self._order

    @classmethod
    def from_query_param(cls, value: Optional[str], allowed_fields: Optional[Iterable[str]] = None) -> 'Order':
        """
        Parse DRF-style ordering: "-created_at,title"
        Unknown fields are dropped when allowed_fields is given
        """
        order = cls()
        if not value:
            return order

        allowed = set(allowed_fields) if allowed_fields is not None else None
        for term in value.split(','):
            term = term.strip()
            if not term:
                continue
            direction = DESC if term.startswith('-') else ASC
            field = term.lstrip('-')
            if not field:
                continue
            if allowed is not None and field not in allowed:
                continue
            order.add(field, direction)
        return order

    def __bool__(self):
        return bool(self._order)

    def __repr__(self):
        return f"Order({dict(self._order)!r})"
