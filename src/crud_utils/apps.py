"""
Django App Configuration for CRUD utilities
"""

from django.apps import AppConfig


class CrudUtilsConfig(AppConfig):
    """
    Configuration for the CRUD utilities application.

    Provides base viewsets, filtering, transformers and response builders
    for exposing models as REST resources.
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'crud_utils'
    verbose_name = 'CRUD Utilities'
