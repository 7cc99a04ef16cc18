"""Article endpoints.

Views stay thin: they validate input shape, pass ``request.user`` as the
actor into ``articles.lifecycle`` and serialize whatever comes back. A
denied mutation surfaces as ``ArticlePermissionDenied`` and is turned into
a redirect by ``core.exceptions.custom_exception_handler``.
"""

from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from accounts.serializers import UserDetailSerializer
from core.response import BaseAPIView, BaseViewSet, api_response
from . import lifecycle, listings
from .exports import csv_download
from .pagination import AdminArticlePagination
from .permissions import IsArticleAdmin
from .serializers import ArticleDraftSerializer, ArticleSerializer, ArticleUpdateSerializer


class ArticleViewSet(BaseViewSet):
    serializer_class = ArticleSerializer
    lookup_value_regex = r"\d{1,18}"

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_queryset(self):
        return listings.published_articles()

    def _articles(self, queryset):
        return api_response(ArticleSerializer(queryset, many=True).data)

    def _article(self, article, status_code=status.HTTP_200_OK):
        return api_response(ArticleSerializer(article).data, status=status_code)

    def list(self, request):
        """Published articles."""
        return self._articles(listings.published_articles())

    @action(detail=False, methods=["get"])
    def mine(self, request):
        return self._articles(listings.own_articles(request.user))

    @action(detail=False, methods=["get"])
    def trash(self, request):
        return self._articles(listings.trashed_articles(request.user))

    def create(self, request):
        """Save a draft and return it for the confirmation step."""
        serializer = ArticleDraftSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        article = lifecycle.create_draft(request.user, serializer.to_fields())
        return self._article(article, status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def confirm(self, request, pk=None):
        return self._article(lifecycle.confirm(request.user, pk))

    def retrieve(self, request, pk=None):
        return self._article(lifecycle.get_readable(request.user, pk))

    @action(detail=True, methods=["get"], url_path="edit")
    def edit_form(self, request, pk=None):
        return self._article(lifecycle.get_owned(request.user, pk))

    def update(self, request, pk=None):
        # Ownership is checked before the payload so that a foreign edit is
        # deflected even when its fields are invalid.
        lifecycle.get_owned(request.user, pk)
        serializer = ArticleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._article(lifecycle.edit(request.user, pk, serializer.to_fields()))

    @action(detail=True, methods=["get"], url_path="delete")
    def delete_confirm(self, request, pk=None):
        return self._article(lifecycle.get_owned(request.user, pk))

    def destroy(self, request, pk=None):
        lifecycle.soft_delete(request.user, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"])
    def restore(self, request, pk=None):
        return self._article(lifecycle.restore(request.user, pk))

    @action(detail=True, methods=["get", "delete"], url_path="force-delete")
    def force_delete(self, request, pk=None):
        """GET shows the confirmation step, DELETE erases the article."""
        if request.method == "GET":
            return self._article(lifecycle.get_owned(request.user, pk, trashed=True))
        lifecycle.force_delete(request.user, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminArticleViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, BaseViewSet):
    """Read-only view of confirmed articles for staff, with a CSV download."""

    serializer_class = ArticleSerializer
    permission_classes = [IsArticleAdmin]
    pagination_class = AdminArticlePagination
    lookup_value_regex = r"\d{1,18}"

    def get_queryset(self):
        if self.action == "retrieve":
            return listings.all_articles()
        return listings.admin_articles()

    @action(detail=False, methods=["get"])
    def download(self, request):
        return csv_download(listings.admin_articles())


class DashboardView(BaseAPIView):
    """Landing view; denied article mutations are redirected here."""

    permission_classes = [IsAuthenticated]

    # noinspection PyMethodMayBeStatic
    def get(self, request):
        return api_response(
            {
                "user": UserDetailSerializer(request.user).data,
                "articles": listings.state_counts(request.user),
            }
        )


__all__ = ["AdminArticleViewSet", "ArticleViewSet", "DashboardView"]
