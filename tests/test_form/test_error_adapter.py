"""
Form Error Adapter Tests
Serializer errors must come out flat, with bracketed origins
"""

import hashlib

from rest_framework import serializers

from crud_utils.error import ErrorCodes
from crud_utils.form import FormErrorAdapter


class AuthorInputSerializer(serializers.Serializer):
    name = serializers.CharField()


class LineSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=10)


class ArticleInputSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=5)
    tags = serializers.ListField(child=serializers.CharField(max_length=3), required=False)
    author = AuthorInputSerializer(required=False)
    lines = LineSerializer(many=True, required=False)

    def validate(self, attrs):
        if attrs.get('title') == 'spam':
            raise serializers.ValidationError('Spam is not allowed.', code='spam')
        return attrs


def adapt(data, **kwargs):
    serializer = ArticleInputSerializer(data=data)
    assert not serializer.is_valid()
    return FormErrorAdapter(serializer, **kwargs)


class TestFormErrorAdapter:

    def test_required_field(self):
        errors = adapt({})

        assert len(errors) == 1
        error = errors[0]
        assert error.origin == 'title'
        assert error.code == 'required'
        assert error.message == 'This field is required.'

    def test_template_comes_from_field_error_messages(self):
        errors = adapt({'title': 'too long'})

        error = errors[0]
        assert error.message == 'Ensure this field has no more than 5 characters.'
        assert error.message_template == 'Ensure this field has no more than {max_length} characters.'
        assert error.code == 'max_length'
        assert error.parameters == {}
        assert error.pluralization is None

    def test_nested_serializer_origin(self):
        errors = adapt({'title': 'ok', 'author': {}})

        assert [error.origin for error in errors] == ['author[name]']

    def test_form_name_prefixes_every_origin(self):
        errors = adapt({'author': {}}, form_name='article')

        assert sorted(error.origin for error in errors) == ['article[author][name]', 'article[title]']

    def test_list_field_items_are_indexed(self):
        errors = adapt({'title': 'ok', 'tags': ['abc', 'abcd']})

        error = errors[0]
        assert error.origin == 'tags[1]'
        assert error.message_template == 'Ensure this field has no more than {max_length} characters.'

    def test_many_nested_serializers_are_indexed(self):
        errors = adapt({'title': 'ok', 'lines': [{'name': 'fine'}, {}]})

        assert [error.origin for error in errors] == ['lines[1][name]']

    def test_non_field_errors_use_root_name(self):
        errors = adapt({'title': 'spam'})

        error = errors[0]
        assert error.origin is None
        assert error.code == 'spam'
        assert error.message == 'Spam is not allowed.'

        named = adapt({'title': 'spam'}, form_name='article')
        assert named[0].origin == 'article'

    def test_plain_error_dict_gets_hashed_code(self):
        errors = FormErrorAdapter({'title': ['Broken']})

        assert errors[0].code == hashlib.md5(b'Broken').hexdigest()
        assert errors[0].origin == 'title'

    def test_list_records_validation_error_code(self):
        assert adapt({}).code == ErrorCodes.VALIDATION_ERROR
        assert adapt({}, validation_error_code=42).code == 42
