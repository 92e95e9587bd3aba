"""
CRUD utilities for Django REST framework

Generic CRUD viewset, dynamic query filtering, serializer error adaptation
and transformer-based JSON responses.
"""

__version__ = '1.0.0'
