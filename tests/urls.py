"""
URL Configuration for the test project
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from tests.testapp.views import (
    ArticleViewSet,
    AuthorViewSet,
    RestrictedArticleViewSet,
    TranslatedArticleViewSet,
)

router = SimpleRouter()
router.register(r'articles', ArticleViewSet, basename='article')
router.register(r'restricted-articles', RestrictedArticleViewSet, basename='restricted-article')
router.register(r'translated-articles', TranslatedArticleViewSet, basename='translated-article')
router.register(r'authors', AuthorViewSet, basename='author')

urlpatterns = [
    path('api/', include(router.urls)),
]
