"""Routing for the article and admin article viewsets."""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import AdminArticleViewSet, ArticleViewSet

router = DefaultRouter()
router.register(r"articles", ArticleViewSet, basename="article")
router.register(r"admin/articles", AdminArticleViewSet, basename="admin-article")

urlpatterns = [
    path("", include(router.urls)),
]
