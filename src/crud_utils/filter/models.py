"""
Filter Models - value shapes understood by the QueryBuilder
"""

from typing import Any, Dict, Optional

from ..conf import crud_settings


class Range:
    """Inclusive range; either bound may be omitted"""

    def __init__(self, from_=None, to=None):
        self.from_ = from_
        self.to = to

    def get_from(self):
        return self.from_

    def get_to(self):
        return self.to

    def is_empty(self) -> bool:
        return self.from_ is None and self.to is None

    def __eq__(self, other):
        return isinstance(other, Range) and (self.from_, self.to) == (other.from_, other.to)

    def __repr__(self):
        return f"Range(from_={self.from_!r}, to={self.to!r})"


class PartialMatchText:
    """Substring match on a text field"""

    def __init__(self, text: str):
        self.text = text

    def get_text(self) -> str:
        return self.text

    def __eq__(self, other):
        return isinstance(other, PartialMatchText) and self.text == other.text

    def __repr__(self):
        return f"PartialMatchText({self.text!r})"


class EmptyData:
    """Marker matching rows where the field IS NULL"""

    def __eq__(self, other):
        return isinstance(other, EmptyData)

    def __hash__(self):
        return hash(EmptyData)

    def __repr__(self):
        return 'EmptyData()'


class Pagination:
    """Offset/limit window over a result set"""

    def __init__(self, offset: int = 0, limit: Optional[int] = None):
        if limit is None:
            limit = crud_settings.DEFAULT_PAGE_SIZE
        if offset < 0:
            raise ValueError(f"Pagination offset must be non-negative, got {offset}")
        if limit <= 0:
            raise ValueError(f"Pagination limit must be positive, got {limit}")
        self.offset = offset
        self.limit = limit

    @classmethod
    def from_page(cls, page: int = 1, page_size: Optional[int] = None) -> 'Pagination':
        """Build from a 1-based page number; page_size is capped at MAX_PAGE_SIZE"""
        if page_size is None:
            page_size = crud_settings.DEFAULT_PAGE_SIZE
        if page < 1:
            raise ValueError(f"Page number must be at least 1, got {page}")
        page_size = min(page_size, crud_settings.MAX_PAGE_SIZE)
        return cls(offset=(page - 1) * page_size, limit=page_size)

    def get_offset(self) -> int:
        return self.offset

    def get_limit(self) -> int:
        return self.limit

    @property
    def page(self) -> int:
        return self.offset // self.limit + 1

    def __repr__(self):
        return f"Pagination(offset={self.offset}, limit={self.limit})"


class Filter:
    """
    Base filter
    Subclasses return the criteria mapping field name -> value shape
    """

    def get_filter(self) -> Dict[str, Any]:
        raise NotImplementedError(f"{self.__class__.__name__} must implement get_filter()")

    def get_relationship_alias(self) -> Optional[str]:
        return None

    def get_collection_max_size(self) -> Optional[int]:
        return None


class SimpleFilter(Filter):
    """Filter over a ready-made criteria mapping"""

    def __init__(self, criteria: Optional[Dict[str, Any]] = None,
                 relationship_alias: Optional[str] = None,
                 collection_max_size: Optional[int] = None):
        self.criteria = dict(criteria or {})
        self.relationship_alias = relationship_alias
        self.collection_max_size = collection_max_size

    def get_filter(self) -> Dict[str, Any]:
        return self.criteria

    def get_relationship_alias(self) -> Optional[str]:
        return self.relationship_alias

    def get_collection_max_size(self) -> Optional[int]:
        return self.collection_max_size
