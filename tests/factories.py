"""
Model factories for tests
"""

import factory
from django.contrib.auth import get_user_model
from factory.django import DjangoModelFactory

from tests.testapp.models import Article, Author

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Factory for creating User instances in tests"""

    class Meta:
        model = User

    username = factory.Sequence(lambda n: f'user{n}')
    email = factory.Sequence(lambda n: f'user{n}@example.com')
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    is_active = True


class AuthorFactory(DjangoModelFactory):

    class Meta:
        model = Author

    name = factory.Faker('name')
    email = factory.Sequence(lambda n: f'author{n}@example.com')


class ArticleFactory(DjangoModelFactory):

    class Meta:
        model = Article

    title = factory.Sequence(lambda n: f'Article {n}')
    body = factory.Faker('paragraph')
    status = 'draft'
    rating = 3
    price = 10
    author = factory.SubFactory(AuthorFactory)
