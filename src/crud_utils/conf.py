"""
Library settings, read from the CRUD_UTILS dict in Django settings

    CRUD_UTILS = {
        'DEFAULT_PAGE_SIZE': 50,
    }
"""

from django.conf import settings
from django.core.signals import setting_changed

DEFAULTS = {
    'DEFAULT_PAGE_SIZE': 20,
    'MAX_PAGE_SIZE': 100,
    'PAGE_QUERY_PARAM': 'page',
    'PAGE_SIZE_QUERY_PARAM': 'page_size',
    'ORDERING_PARAM': 'ordering',
    'INCLUDE_PARAM': 'include',
    'FILTER_EMPTY_MARKER': 'null',
}


class CrudSettings:
    """Attribute access to CRUD_UTILS with defaults filled in"""

    def __init__(self, defaults=None):
        self.defaults = defaults or DEFAULTS
        self._cached = set()

    @property
    def user_settings(self):
        if not hasattr(self, '_user_settings'):
            self._user_settings = getattr(settings, 'CRUD_UTILS', {})
        return self._user_settings

    def __getattr__(self, attr):
        if attr not in self.defaults:
            raise AttributeError(f"Invalid CRUD_UTILS setting: '{attr}'")

        value = self.user_settings.get(attr, self.defaults[attr])
        self._cached.add(attr)
        setattr(self, attr, value)
        return value

    def reload(self):
        for attr in self._cached:
            delattr(self, attr)
        self._cached.clear()
        if hasattr(self, '_user_settings'):
            delattr(self, '_user_settings')


crud_settings = CrudSettings(DEFAULTS)


def reload_crud_settings(*args, **kwargs):
    if kwargs.get('setting') == 'CRUD_UTILS':
        crud_settings.reload()


setting_changed.connect(reload_crud_settings)
