"""
CRUD ViewSet - generic create/read/update/delete(/list) endpoints for a model
Following SOLID principles: subclasses supply the repository, form,
transformer and empty entity; the base class owns the request lifecycle
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.response import Response

from ..conf import crud_settings
from ..error import ErrorCodes
from ..filter import Filter, Pagination, QueryBuilder, SimpleFilter
from ..form import FormErrorAdapter
from ..order import CrudOrderingFilter, Order
from ..pagination import CrudPageNumberPagination
from ..response import TransformableJsonResponseBuilder
from ..transformer import Manager

logger = logging.getLogger(__name__)


class CRUDViewSet(ABC, viewsets.ViewSet):
    """
    Base controller for exposing a model as a REST resource

        class ArticleViewSet(CRUDViewSet):
            def get_entity_repository(self):
                return BaseRepository(Article)

            def create_entity_form(self, entity, data, **options):
                return ArticleSerializer(entity, data=data, **options)

            def create_entity_transformer(self):
                return ArticleTransformer()

            def create_entity(self):
                return Article()

        router.register(r'articles', ArticleViewSet, basename='article')
    """

    ACTION_CREATE = 1
    ACTION_READ = 2
    ACTION_UPDATE = 3
    ACTION_DELETE = 4
    ACTION_LIST = 5

    # List endpoint configuration
    filter_serializer_class = None
    filter_relationship_alias: Optional[str] = None
    ordering_fields = None
    ordering = ()
    ordering_filter_class = CrudOrderingFilter
    pagination_class = CrudPageNumberPagination

    @abstractmethod
    def get_entity_repository(self):
        """Repository of the entity"""

    @abstractmethod
    def create_entity_form(self, entity, data, **options):
        """Serializer bound to ``entity`` and the request ``data``"""

    @abstractmethod
    def create_entity_transformer(self):
        """Transformer rendering the entity"""

    @abstractmethod
    def create_entity(self):
        """New, unsaved entity"""

    def get_response_builder(self) -> TransformableJsonResponseBuilder:
        manager = Manager().parse_includes(self.request.query_params.get(crud_settings.INCLUDE_PARAM))
        return TransformableJsonResponseBuilder(manager=manager, request=self.request)

    def get_roles(self) -> Dict[int, Optional[str]]:
        """
        Roles for actions

        None means the action is unrestricted; any other value is a role
        the user must be granted.
        """
        return {
            self.ACTION_CREATE: None,
            self.ACTION_READ: None,
            self.ACTION_UPDATE: None,
            self.ACTION_DELETE: None,
            self.ACTION_LIST: None,
        }

    def get_access_role(self, action: int) -> Optional[str]:
        return self.get_roles().get(action)

    def is_granted(self, role: str) -> bool:
        """User has the role attribute or the Django permission named by ``role``"""
        user = getattr(self.request, 'user', None)
        if user is None or not user.is_authenticated:
            return False
        if getattr(user, 'role', None) == role:
            return True
        return user.has_perm(role)

    def check_access(self, action: int) -> None:
        role = self.get_access_role(action)
        if role and not self.is_granted(role):
            logger.warning(f"Access to action {action} of {self.__class__.__name__} denied, role '{role}' required")
            raise PermissionDenied()

    def post_entity_load_check_access(self, action: int, entity) -> None:
        """By default do nothing, override to check access to a loaded entity"""

    def load_entity(self, action: int, pk):
        entity = self.get_entity_repository().find(pk)
        if entity is None:
            raise NotFound()
        self.post_entity_load_check_access(action, entity)
        return entity

    def do_update(self, entity, request, success_status: int = status.HTTP_200_OK) -> Response:
        response_builder = self.get_response_builder()

        form = self.create_entity_form(entity, request.data, partial=request.method == 'PATCH')
        if form.is_valid():
            entity = self.get_entity_repository().persist(form)
            return response_builder \
                .set_transformable_item(entity, self.create_entity_transformer()) \
                .build(success_status)

        return response_builder \
            .add_error_list(FormErrorAdapter(form, ErrorCodes.VALIDATION_ERROR)) \
            .build(status.HTTP_400_BAD_REQUEST)

    def do_read(self, entity) -> Response:
        return self.get_response_builder() \
            .set_transformable_item(entity, self.create_entity_transformer()) \
            .build()

    def do_delete(self, entity) -> Response:
        self.get_entity_repository().remove(entity)
        return self.get_response_builder().build()

    def create(self, request, *args, **kwargs):
        self.check_access(self.ACTION_CREATE)
        return self.do_update(self.create_entity(), request, status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None, *args, **kwargs):
        self.check_access(self.ACTION_READ)
        return self.do_read(self.load_entity(self.ACTION_READ, pk))

    def update(self, request, pk=None, *args, **kwargs):
        self.check_access(self.ACTION_UPDATE)
        return self.do_update(self.load_entity(self.ACTION_UPDATE, pk), request)

    def partial_update(self, request, pk=None, *args, **kwargs):
        return self.update(request, pk, *args, **kwargs)

    def destroy(self, request, pk=None, *args, **kwargs):
        self.check_access(self.ACTION_DELETE)
        return self.do_delete(self.load_entity(self.ACTION_DELETE, pk))

    # List

    def create_filter(self, request) -> Filter:
        if self.filter_serializer_class is None:
            return SimpleFilter(relationship_alias=self.filter_relationship_alias)
        serializer = self.filter_serializer_class(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        return serializer.to_filter(relationship_alias=self.filter_relationship_alias)

    def get_serializer_class(self):
        """Serializer whose readable fields may be ordered on when ordering_fields is None"""
        return getattr(self.create_entity_transformer(), 'serializer_class', None)

    def create_order(self, request) -> Order:
        queryset = self.get_entity_repository().create_queryset()
        return self.ordering_filter_class().get_order(request, queryset, self)

    def create_pagination(self, request) -> Pagination:
        return self.pagination_class().get_pagination(request)

    def do_list(self, filter: Filter, order: Order, pagination: Pagination) -> Response:
        builder = QueryBuilder(self.get_entity_repository()) \
            .set_filter(filter) \
            .set_order(order) \
            .set_pagination(pagination)

        entities = list(builder.get_query())
        total = builder.get_total_size()

        return self.get_response_builder() \
            .set_transformable_collection(entities, self.create_entity_transformer()) \
            .set_pagination(pagination, total, len(entities)) \
            .build()

    def list(self, request, *args, **kwargs):
        self.check_access(self.ACTION_LIST)
        return self.do_list(
            self.create_filter(request),
            self.create_order(request),
            self.create_pagination(request),
        )
