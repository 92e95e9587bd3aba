"""
Transformers - map entities to their external JSON representation
Built on DRF serializers for the field-level rendering
"""

from typing import Any, Dict, Optional, Sequence

from django.core.exceptions import ImproperlyConfigured


class TransformerAbstract:
    """
    Base transformer

    Subclasses either set ``serializer_class`` or override ``transform``.
    Related resources are exposed through ``available_includes`` and
    ``include_<name>`` methods returning an Item, a Collection or None.
    ``default_includes`` are always embedded.
    """

    serializer_class = None
    resource_key: Optional[str] = None
    available_includes: Sequence[str] = ()
    default_includes: Sequence[str] = ()

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        self.context = dict(context or {})

    def get_serializer_context(self) -> Dict[str, Any]:
        return self.context

    def get_resource_key(self) -> Optional[str]:
        return self.resource_key

    def transform(self, entity) -> Dict[str, Any]:
        """Render a single entity; the default delegates to serializer_class"""
        if self.serializer_class is None:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} must define serializer_class or override transform()"
            )
        return self.serializer_class(entity, context=self.get_serializer_context()).data

    def call_include(self, name: str, entity):
        method = getattr(self, f'include_{name}', None)
        if method is None:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} lists include '{name}' but has no include_{name}() method"
            )
        return method(entity)


class TranslatableTransformerMixin:
    """Transformer whose output depends on the client's language"""

    language: Optional[str] = None

    def set_language(self, language: str) -> None:
        self.language = language
        self.context['language'] = language

    def get_language(self) -> Optional[str]:
        return self.language


def is_translatable(transformer) -> bool:
    return isinstance(transformer, TranslatableTransformerMixin)
