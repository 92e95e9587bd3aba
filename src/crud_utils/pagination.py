"""
Page Number Pagination - reads page/page_size query parameters
Following Single Responsibility Principle: only request parsing lives here,
the QueryBuilder applies the resulting offset and limit
"""

from django.utils.translation import gettext_lazy as _
from rest_framework.exceptions import NotFound
from rest_framework.pagination import PageNumberPagination, _positive_int

from .conf import crud_settings
from .filter.models import Pagination


class CrudPageNumberPagination(PageNumberPagination):
    """
    DRF page number pagination configured from CRUD_UTILS

    Invalid page numbers answer 404 as DRF does; an invalid page_size
    falls back to the default and is capped at MAX_PAGE_SIZE.
    """

    # "last" needs the total, which is only counted after the page is fetched
    last_page_strings = ()

    @property
    def page_size(self):
        return crud_settings.DEFAULT_PAGE_SIZE

    @property
    def max_page_size(self):
        return crud_settings.MAX_PAGE_SIZE

    @property
    def page_query_param(self):
        return crud_settings.PAGE_QUERY_PARAM

    @property
    def page_size_query_param(self):
        return crud_settings.PAGE_SIZE_QUERY_PARAM

    def get_pagination(self, request) -> Pagination:
        page_number = self.get_page_number(request, None)
        try:
            page = _positive_int(page_number, strict=True)
        except ValueError:
            raise NotFound(self.invalid_page_message.format(
                page_number=page_number,
                message=_('That page number is not a positive integer'),
            ))
        return Pagination.from_page(page, self.get_page_size(request))
