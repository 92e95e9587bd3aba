"""
Resources - wrap an entity or a collection together with its transformer
"""


class ResourceAbstract:
    """Base resource: data, the transformer producing its JSON, and a key"""

    def __init__(self, data, transformer, resource_key=None):
        self.data = data
        self.transformer = transformer
        self.resource_key = resource_key if resource_key is not None else getattr(transformer, 'resource_key', None)

    def __repr__(self):
        return f"<{self.__class__.__name__} key={self.resource_key!r}>"


class Item(ResourceAbstract):
    """Single entity resource"""


class Collection(ResourceAbstract):
    """Iterable of entities sharing one transformer"""

    def __iter__(self):
        return iter(self.data)
