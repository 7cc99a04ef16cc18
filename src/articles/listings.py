"""Read projections over articles."""

from django.db.models import Count, Q

from .models import Article


def published_articles():
    return Article.objects.published()


def own_articles(actor):
    """The actor's "my page": everything they own that is not in the trash."""
    return Article.objects.owned_by(actor)


def trashed_articles(actor):
    return Article.all_objects.trashed().owned_by(actor)


def admin_articles():
    """Every confirmed article, trashed ones included."""
    return Article.all_objects.confirmed()


def all_articles():
    return Article.all_objects.all()


def state_counts(actor) -> dict[str, int]:
    return Article.all_objects.owned_by(actor).aggregate(
        unconfirmed=Count("pk", filter=Q(confirmed=False, deleted_at__isnull=True)),
        confirmed=Count("pk", filter=Q(confirmed=True, deleted_at__isnull=True)),
        trashed=Count("pk", filter=Q(deleted_at__isnull=False)),
    )


__all__ = [
    "admin_articles",
    "all_articles",
    "own_articles",
    "published_articles",
    "state_counts",
    "trashed_articles",
]
