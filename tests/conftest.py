"""
Pytest Configuration and Fixtures
"""

from typing import Generator

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient, APIRequestFactory

from tests.factories import ArticleFactory, AuthorFactory, UserFactory

User = get_user_model()


@pytest.fixture
def api_client() -> Generator[APIClient, None, None]:
    """Django REST API client fixture"""
    yield APIClient()


@pytest.fixture
def request_factory() -> APIRequestFactory:
    return APIRequestFactory()


@pytest.fixture
def user(db) -> User:
    """Create a regular user for testing"""
    return UserFactory()


@pytest.fixture
def admin_user(db) -> User:
    """Create a superuser for testing"""
    return UserFactory(is_staff=True, is_superuser=True)


@pytest.fixture
def authenticated_api_client(api_client, user) -> Generator[APIClient, None, None]:
    """Authenticated API client fixture"""
    api_client.force_authenticate(user=user)
    yield api_client


@pytest.fixture
def author(db):
    return AuthorFactory(name='Jane Austen')


@pytest.fixture
def article(author):
    return ArticleFactory(title='Pride and Prejudice', author=author)
