"""
Base Repository - KISS Implementation
Data access used by the CRUD controller and the filter QueryBuilder
"""

import logging
from typing import Generic, Optional, TypeVar

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models, transaction

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=models.Model)


class BaseRepository(Generic[T]):
    """
    Simple Base Repository - Following KISS principle
    Wraps a model's default manager for lookups and persistence
    """

    def __init__(self, model: type):
        """Initialize with model class"""
        self.model = model

    def create_queryset(self) -> models.QuerySet:
        """Fresh queryset over all records"""
        return self.model._default_manager.all()

    def find(self, pk) -> Optional[T]:
        """Get single record by primary key, None when missing or malformed"""
        try:
            return self.create_queryset().get(pk=pk)
        except (self.model.DoesNotExist, ValueError, TypeError, DjangoValidationError):
            logger.debug(f"{self.model.__name__} with pk {pk!r} not found")
            return None

    def persist(self, form) -> T:
        """Save the entity bound to a validated serializer (insert or update)"""
        instance = form.instance
        created = instance is None or instance._state.adding
        with transaction.atomic():
            entity = form.save()
        action = 'Created' if created else 'Updated'
        logger.info(f"{action} {self.model.__name__} with pk {entity.pk}")
        return entity

    def remove(self, entity: T) -> None:
        """Delete record (hard delete)"""
        pk = entity.pk
        with transaction.atomic():
            entity.delete()
        logger.info(f"Deleted {self.model.__name__} with pk {pk}")
