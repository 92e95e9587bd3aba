"""
Resource transformation: transformers, resources and the manager running them
"""

from .base import TransformerAbstract, TranslatableTransformerMixin, is_translatable
from .manager import Manager, Scope
from .resources import Collection, Item

__all__ = [
    'TransformerAbstract',
    'TranslatableTransformerMixin',
    'is_translatable',
    'Manager',
    'Scope',
    'Item',
    'Collection',
]
