"""
Form Error Adapter - turns DRF serializer errors into an ErrorList
Each leaf error keeps the bracketed path of the field that produced it
"""

import hashlib
from typing import Any, Optional

from rest_framework import serializers
from rest_framework.settings import api_settings

from ..error import Error, ErrorCodes, ErrorList


class FormErrorAdapter(ErrorList):
    """
    Adapter from (possibly nested) serializer errors to Error objects

    Origins are built like nested form names: the root name followed by
    ``[child]`` per nesting level, e.g. ``article[author][name]``.
    Without a root name the first level is bare: ``author[name]``.
    """

    def __init__(self, form, validation_error_code=ErrorCodes.VALIDATION_ERROR, form_name: str = ''):
        super().__init__(code=validation_error_code)
        self.form_name = form_name

        if isinstance(form, serializers.BaseSerializer):
            serializer, errors = form, form.errors
        else:
            serializer, errors = None, form

        self._collect(errors, [], serializer)

    def _collect(self, errors: Any, path: list, field: Any) -> None:
        if isinstance(errors, dict):
            for key, value in errors.items():
                if key == api_settings.NON_FIELD_ERRORS_KEY:
                    self._collect(value, path, field)
                else:
                    self._collect(value, path + [str(key)], self._child_field(field, key))
        elif isinstance(errors, (list, tuple)):
            if errors and all(isinstance(item, (dict, list, tuple)) for item in errors):
                # many=True serializers report one entry per item, empty when valid
                for index, item in enumerate(errors):
                    if item:
                        self._collect(item, path + [str(index)], self._child_field(field, index))
            else:
                for item in errors:
                    self._collect(item, path, field)
        elif errors is not None:
            self.add(self._create_error(errors, path, field))

    @staticmethod
    def _child_field(field: Any, key: Any) -> Any:
        if field is None:
            return None
        if isinstance(field, (serializers.ListSerializer, serializers.ListField, serializers.DictField)):
            return field.child
        fields = getattr(field, 'fields', None)
        if fields is not None and isinstance(key, str):
            return fields.get(key)
        return None

    def _create_error(self, detail: Any, path: list, field: Any) -> Error:
        message = str(detail)
        code = getattr(detail, 'code', None)

        template = None
        if field is not None and code:
            template = getattr(field, 'error_messages', {}).get(code)
        template = str(template) if template is not None else message

        return Error(
            message=message,
            message_template=template,
            parameters={},
            pluralization=None,
            code=code or hashlib.md5(template.encode('utf-8')).hexdigest(),
            origin=self._collect_origin_name(path),
        )

    def _collect_origin_name(self, path: list) -> Optional[str]:
        if not path:
            return self.form_name or None
        if self.form_name:
            head, rest = self.form_name, path
        else:
            head, rest = path[0], path[1:]
        return head + ''.join(f'[{part}]' for part in rest)
