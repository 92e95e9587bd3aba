"""
JSON Response Builders - assemble {"data", "included", "errors", "meta"} bodies
Following Builder pattern: setters chain, build() produces the DRF Response
"""

import logging
from typing import Any, Dict, List, Optional

from django.core.exceptions import ImproperlyConfigured
from django.utils.translation import get_language_from_request
from rest_framework import status
from rest_framework.response import Response

from ..error import Error, ErrorList
from ..filter.models import Pagination
from ..transformer import Collection, Item, Manager, TransformerAbstract, is_translatable

logger = logging.getLogger(__name__)


class JsonResponseBuilder:
    """Collects data, errors and meta, then builds one Response"""

    def __init__(self, manager: Optional[Manager] = None, request=None):
        self.manager = manager if manager is not None else Manager()
        self.request = request
        self.reset()

    def reset(self) -> 'JsonResponseBuilder':
        self._data: Dict[str, Any] = {}
        self._errors: List[Error] = []
        self._meta: Dict[str, Any] = {}
        return self

    def set_request(self, request) -> 'JsonResponseBuilder':
        self.request = request
        return self

    def set_data(self, key: str, value: Any) -> 'JsonResponseBuilder':
        self._data[key] = value
        return self

    def set_meta(self, key: str, value: Any) -> 'JsonResponseBuilder':
        self._meta[key] = value
        return self

    def add_error(self, error: Error) -> 'JsonResponseBuilder':
        self._errors.append(error)
        return self

    def add_error_list(self, error_list: ErrorList) -> 'JsonResponseBuilder':
        for error in error_list:
            self.add_error(error)
        return self

    def has_errors(self) -> bool:
        return bool(self._errors)

    def get_body(self) -> Dict[str, Any]:
        body = dict(self._data)
        if self._errors:
            body['errors'] = [error.to_dict() for error in self._errors]
        if self._meta:
            body['meta'] = dict(self._meta)
        return body

    def build(self, status_code: Optional[int] = None, headers=None) -> Response:
        if status_code is None:
            status_code = status.HTTP_400_BAD_REQUEST if self._errors else status.HTTP_200_OK
        body = self.get_body()
        self.reset()
        return Response(body, status=status_code, headers=headers)


class TransformableJsonResponseBuilder(JsonResponseBuilder):
    """Response builder whose data comes from transformers"""

    def _prepare_transformer(self, transformer: TransformerAbstract) -> None:
        if is_translatable(transformer):
            if self.request is None:
                raise ImproperlyConfigured(
                    'A request must be bound to the response builder for translatable transformers'
                )
            language = get_language_from_request(self.request) or ''
            transformer.set_language(language)
            logger.debug(f"{transformer.__class__.__name__} language set to '{language}'")

    def _set_transformable_resource(self, resource) -> 'TransformableJsonResponseBuilder':
        transformed = self.manager.create_data(resource).to_dict()
        self.set_data('data', transformed['data'])
        if 'included' in transformed:
            self.set_data('included', transformed['included'])
        return self

    def set_transformable_item(self, entity, transformer: TransformerAbstract) -> 'TransformableJsonResponseBuilder':
        self._prepare_transformer(transformer)
        return self._set_transformable_resource(Item(entity, transformer, transformer.get_resource_key()))

    def set_transformable_collection(self, collection, transformer: TransformerAbstract) -> 'TransformableJsonResponseBuilder':
        self._prepare_transformer(transformer)
        return self._set_transformable_resource(Collection(collection, transformer, transformer.get_resource_key()))

    def set_pagination(self, pagination: Pagination, total: int, count: Optional[int] = None) -> 'TransformableJsonResponseBuilder':
        if count is None:
            data = self._data.get('data')
            count = len(data) if isinstance(data, list) else 0
        pages = (total + pagination.get_limit() - 1) // pagination.get_limit() if total else 0
        return self.set_meta('pagination', {
            'total': total,
            'count': count,
            'offset': pagination.get_offset(),
            'limit': pagination.get_limit(),
            'page': pagination.page,
            'page_size': pagination.get_limit(),
            'pages': pages,
        })
