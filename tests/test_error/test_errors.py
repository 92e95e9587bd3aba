"""
Error Model Tests
"""

import pytest

from crud_utils.error import Error, ErrorCodes, ErrorList


class TestError:

    def test_template_defaults_to_message(self):
        error = Error(message='This field is required.')

        assert error.message_template == 'This field is required.'
        assert error.parameters == {}

    def test_to_dict_omits_missing_pluralization(self):
        error = Error(message='Bad value', code=ErrorCodes.VALIDATION_ERROR, origin='title')

        assert error.to_dict() == {
            'message': 'Bad value',
            'template': 'Bad value',
            'parameters': {},
            'code': 1000,
            'origin': 'title',
        }

    def test_to_dict_includes_pluralization(self):
        error = Error(message='2 items', message_template='{count} items', parameters={'count': 2}, pluralization=2)

        data = error.to_dict()

        assert data['pluralization'] == 2
        assert data['template'] == '{count} items'


class TestErrorList:

    def test_keeps_insertion_order(self):
        errors = ErrorList([Error('first'), Error('second')])
        errors.add(Error('third'))

        assert [error.message for error in errors] == ['first', 'second', 'third']
        assert len(errors) == 3
        assert errors[1].message == 'second'

    def test_empty_list_is_falsy(self):
        assert not ErrorList()
        assert ErrorList([Error('x')])

    def test_rejects_non_error_items(self):
        with pytest.raises(TypeError):
            ErrorList().add('not an error')

    def test_to_list_renders_every_error(self):
        errors = ErrorList([Error('a', code=1), Error('b', code=2)], code=ErrorCodes.VALIDATION_ERROR)

        assert [item['code'] for item in errors.to_list()] == [1, 2]
        assert errors.code == ErrorCodes.VALIDATION_ERROR
