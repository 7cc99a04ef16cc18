"""Serializers for article payloads."""

from rest_framework import serializers

from .lifecycle import CONTENT_MAX_LENGTH, DRAFT_TITLE_MAX_LENGTH, TITLE_MAX_LENGTH, ArticleFields
from .models import Article


class ArticleSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)
    trashed = serializers.BooleanField(source="is_trashed", read_only=True)

    class Meta:
        model = Article
        fields = [
            "id",
            "title",
            "content",
            "user_id",
            "confirmed",
            "trashed",
            "deleted_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ArticleUpdateSerializer(serializers.Serializer):
    """Input for editing an article; unknown keys are ignored."""

    title = serializers.CharField(max_length=TITLE_MAX_LENGTH)
    content = serializers.CharField(max_length=CONTENT_MAX_LENGTH)

    def to_fields(self) -> ArticleFields:
        return ArticleFields(title=self.validated_data["title"], content=self.validated_data["content"])


class ArticleDraftSerializer(ArticleUpdateSerializer):
    title = serializers.CharField(max_length=DRAFT_TITLE_MAX_LENGTH)


__all__ = ["ArticleSerializer", "ArticleDraftSerializer", "ArticleUpdateSerializer"]
