"""
Filter Serializers - parse query parameters into filter criteria

    class ArticleFilterSerializer(FilterSerializer):
        title = PartialMatchTextField()
        price = RangeField(child=serializers.DecimalField(max_digits=10, decimal_places=2))
        author_name = serializers.CharField(source='author.name')

    ?title[like]=django&price[from]=10&author_name=Jane&archived_at=null
"""

from django.utils.translation import gettext_lazy as _
from rest_framework import serializers
from rest_framework.fields import empty

from ..conf import crud_settings
from .models import EmptyData, PartialMatchText, Range, SimpleFilter


class RangeField(serializers.Field):
    """Reads ``name[from]`` / ``name[to]`` (or a {"from", "to"} object) into a Range"""

    default_error_messages = {
        'invalid': _('Expected a range with "from" and/or "to" bounds.'),
        'inverted': _('Range lower bound must not be greater than upper bound.'),
    }

    def __init__(self, child=None, **kwargs):
        kwargs.setdefault('required', False)
        self.child = child if child is not None else serializers.CharField()
        super().__init__(**kwargs)
        self.child.bind(field_name='', parent=self)

    def get_value(self, dictionary):
        lower = dictionary.get(f'{self.field_name}[from]', empty)
        upper = dictionary.get(f'{self.field_name}[to]', empty)
        if lower is empty and upper is empty:
            value = dictionary.get(self.field_name, empty)
            return value if isinstance(value, dict) else empty
        return {'from': lower, 'to': upper}

    def to_internal_value(self, data):
        if not isinstance(data, dict):
            self.fail('invalid')

        bounds = []
        for key in ('from', 'to'):
            raw = data.get(key, empty)
            if raw is empty or raw is None or raw == '':
                bounds.append(None)
            else:
                bounds.append(self.child.run_validation(raw))

        lower, upper = bounds
        if lower is not None and upper is not None and lower > upper:
            self.fail('inverted')
        return Range(lower, upper)

    def to_representation(self, value):
        return {
            'from': None if value.get_from() is None else self.child.to_representation(value.get_from()),
            'to': None if value.get_to() is None else self.child.to_representation(value.get_to()),
        }


class PartialMatchTextField(serializers.CharField):
    """Reads ``name[like]`` (or plain ``name``) into a PartialMatchText"""

    def get_value(self, dictionary):
        value = dictionary.get(f'{self.field_name}[like]', empty)
        if value is empty:
            value = dictionary.get(self.field_name, empty)
        return value

    def to_internal_value(self, data):
        return PartialMatchText(super().to_internal_value(data))

    def to_representation(self, value):
        return value.get_text()


class FilterSerializer(serializers.Serializer):
    """
    Validates filter input and builds a SimpleFilter

    Always partial: absent parameters add no criteria.
    Any declared field whose raw value equals FILTER_EMPTY_MARKER
    becomes an IS NULL check.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('partial', True)
        super().__init__(*args, **kwargs)

    def to_internal_value(self, data):
        marker = crud_settings.FILTER_EMPTY_MARKER
        empties = []

        if hasattr(data, 'get'):
            for field in self._writable_fields:
                if data.get(field.field_name) == marker:
                    empties.append(field)
            if empties:
                data = data.copy()
                for field in empties:
                    data.pop(field.field_name, None)

        validated = super().to_internal_value(data)
        for field in empties:
            self.set_value(validated, field.source_attrs, EmptyData())
        return validated

    def to_filter(self, relationship_alias=None, collection_max_size=None) -> SimpleFilter:
        if not hasattr(self, '_validated_data'):
            self.is_valid(raise_exception=True)
        return SimpleFilter(
            flatten_criteria(self.validated_data),
            relationship_alias=relationship_alias,
            collection_max_size=collection_max_size,
        )


def flatten_criteria(data, prefix=''):
    """Nested sources ({"author": {"name": x}}) become dotted paths ("author.name")"""
    criteria = {}
    for key, value in data.items():
        path = f'{prefix}{key}'
        if isinstance(value, dict):
            criteria.update(flatten_criteria(value, f'{path}.'))
        else:
            criteria[path] = value
    return criteria
