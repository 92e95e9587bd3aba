"""
Transformation Manager - runs resources through their transformers
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from .base import is_translatable
from .resources import Collection, Item, ResourceAbstract

logger = logging.getLogger(__name__)


class Scope:
    """Result of transforming one resource"""

    def __init__(self, manager: 'Manager', resource: ResourceAbstract):
        self.manager = manager
        self.resource = resource
        self._included: Dict[str, List[Dict[str, Any]]] = {}
        self._seen: Dict[str, set] = {}

    def to_dict(self) -> Dict[str, Any]:
        self._included = {}
        self._seen = {}

        if isinstance(self.resource, Item):
            data = self._transform_entity(self.resource.data, self.resource.transformer)
        elif isinstance(self.resource, Collection):
            data = [self._transform_entity(entity, self.resource.transformer) for entity in self.resource]
        else:
            raise TypeError(f"Unsupported resource type: {type(self.resource).__name__}")

        result = {'data': data}
        if self._included:
            result['included'] = self._included
        return result

    def _transform_entity(self, entity, transformer) -> Dict[str, Any]:
        transformed = transformer.transform(entity)
        for name in self.manager.get_includes_for(transformer):
            related = transformer.call_include(name, entity)
            if related is None:
                continue
            if is_translatable(transformer) and is_translatable(related.transformer):
                related.transformer.set_language(transformer.get_language())
            key = related.resource_key or name
            entities = [related.data] if isinstance(related, Item) else list(related)
            for related_entity in entities:
                if related_entity is None:
                    continue
                self._add_included(key, related.transformer.transform(related_entity))
        return transformed

    def _add_included(self, key: str, item: Dict[str, Any]) -> None:
        bucket = self._included.setdefault(key, [])
        seen = self._seen.setdefault(key, set())
        identifier = item.get('id') if isinstance(item, dict) else None
        if identifier is not None:
            if identifier in seen:
                return
            seen.add(identifier)
        bucket.append(item)


class Manager:
    """
    Entry point for transformation
    Keeps the includes requested by the client
    """

    def __init__(self):
        self.requested_includes: List[str] = []

    def parse_includes(self, includes: Union[str, Iterable[str], None]) -> 'Manager':
        if not includes:
            self.requested_includes = []
            return self
        if isinstance(includes, str):
            includes = includes.split(',')
        self.requested_includes = [name.strip() for name in includes if name and name.strip()]
        return self

    def get_includes_for(self, transformer) -> List[str]:
        names = list(transformer.default_includes)
        for name in self.requested_includes:
            if name in names:
                continue
            if name in transformer.available_includes:
                names.append(name)
            else:
                logger.debug(f"Ignoring unavailable include '{name}' for {transformer.__class__.__name__}")
        return names

    def create_data(self, resource: ResourceAbstract, includes: Optional[Iterable[str]] = None) -> Scope:
        if includes is not None:
            self.parse_includes(includes)
        return Scope(self, resource)
