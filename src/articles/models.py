"""Article model with an owner, a confirmation flag and soft deletion."""

from django.conf import settings
from django.db import models
from django.utils import timezone


class ArticleQuerySet(models.QuerySet):
    def active(self):
        return self.filter(deleted_at__isnull=True)

    def trashed(self):
        return self.filter(deleted_at__isnull=False)

    def confirmed(self):
        return self.filter(confirmed=True)

    def published(self):
        """Confirmed and not in the trash: what the public listing shows."""
        return self.active().confirmed()

    def owned_by(self, user):
        return self.filter(user_id=getattr(user, "pk", None))


class ActiveArticleManager(models.Manager.from_queryset(ArticleQuerySet)):
    """Default manager; trashed rows are hidden unless ``all_objects`` is used."""

    def get_queryset(self):
        return super().get_queryset().active()


class Article(models.Model):
    """A short text article.

    ``confirmed`` and ``deleted_at`` are independent: trashing an article
    leaves its confirmation untouched so that a restore brings it back in
    the state it was in.
    """

    title = models.CharField(max_length=255)
    content = models.TextField(max_length=5000)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="articles")
    confirmed = models.BooleanField(default=False)
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ActiveArticleManager()
    all_objects = ArticleQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title

    @property
    def is_trashed(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        self.deleted_at = timezone.now()
        self.save(update_fields=["deleted_at", "updated_at"])

    def restore(self) -> None:
        self.deleted_at = None
        self.save(update_fields=["deleted_at", "updated_at"])


__all__ = ["Article", "ArticleQuerySet"]
