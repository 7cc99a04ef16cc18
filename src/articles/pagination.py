"""Fixed-size pagination for the admin article listing."""

from django.conf import settings
from rest_framework.pagination import PageNumberPagination


class AdminArticlePagination(PageNumberPagination):
    page_size = settings.ARTICLE_ADMIN_PAGE_SIZE


__all__ = ["AdminArticlePagination"]
