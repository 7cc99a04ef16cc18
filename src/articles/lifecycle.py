"""Article lifecycle state machine.

States are derived from two independent columns, ``confirmed`` and
``deleted_at``::

    create_draft -> UNCONFIRMED --confirm--> CONFIRMED
                        |                        |
                        +------ soft_delete -----+--> TRASHED --force_delete--> (row removed)
                        ^                                |
                        +------------ restore -----------+   (back to the prior state)

Every function takes the acting user explicitly. Failures are raised as
``ArticleNotFound``, ``ArticlePermissionDenied`` or ``ArticleValidationError``;
turning them into HTTP responses is left to the caller.

Lookups check, in order: the article exists in a state the action applies
to, the actor owns it, then the submitted fields.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .exceptions import ArticleNotFound, ArticlePermissionDenied, ArticleValidationError
from .models import Article
from .policy import can_mutate, can_read

logger = logging.getLogger(__name__)

# The draft path accepts far shorter titles than the edit path. Both limits
# are kept as they are until the product owner settles on one (articles.W001).
DRAFT_TITLE_MAX_LENGTH = 5
TITLE_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 5000


class ArticleState(str, Enum):
    UNCONFIRMED = "unconfirmed"
    CONFIRMED = "confirmed"
    TRASHED = "trashed"

    @classmethod
    def of(cls, article: Article) -> "ArticleState":
        if article.deleted_at is not None:
            return cls.TRASHED
        return cls.CONFIRMED if article.confirmed else cls.UNCONFIRMED


ACTIVE_STATES = frozenset({ArticleState.UNCONFIRMED, ArticleState.CONFIRMED})
TRASHED_STATES = frozenset({ArticleState.TRASHED})


@dataclass(frozen=True)
class ArticleFields:
    """The fields an author is allowed to write. Nothing else reaches the model."""

    title: str
    content: str

    def validate(self, title_max_length: int) -> None:
        errors: dict[str, list[str]] = {}
        _check_text(errors, "title", self.title, title_max_length)
        _check_text(errors, "content", self.content, CONTENT_MAX_LENGTH)
        if errors:
            raise ArticleValidationError(errors)


def _check_text(errors: dict[str, list[str]], field: str, value, max_length: int) -> None:
    if not isinstance(value, str) or not value.strip():
        errors[field] = ["This field is required."]
    elif len(value) > max_length:
        errors[field] = [f"Ensure this field has no more than {max_length} characters."]


def _actor_label(actor) -> str:
    return str(getattr(actor, "pk", None) or "anonymous")


def _load(article_id, states: frozenset) -> Article:
    article = Article.all_objects.filter(pk=article_id).first()
    if article is None or ArticleState.of(article) not in states:
        raise ArticleNotFound(article_id)
    return article


def _load_owned(actor, article_id, states: frozenset, action: str) -> Article:
    article = _load(article_id, states)
    if not can_mutate(actor, article):
        logger.warning("Denied %s of article %s to actor %s", action, article.pk, _actor_label(actor))
        raise ArticlePermissionDenied(action)
    return article


def create_draft(actor, fields: ArticleFields) -> Article:
    """Store a new unconfirmed article owned by ``actor``."""
    if not getattr(actor, "is_authenticated", False):
        raise ArticlePermissionDenied("create")
    fields.validate(DRAFT_TITLE_MAX_LENGTH)
    article = Article.objects.create(user=actor, title=fields.title, content=fields.content)
    logger.info("Article %s drafted by %s", article.pk, _actor_label(actor))
    return article


def confirm(actor, article_id) -> Article:
    """Publish a draft. Confirming an already confirmed article changes nothing."""
    article = _load_owned(actor, article_id, ACTIVE_STATES, "confirm")
    if not article.confirmed:
        article.confirmed = True
        article.save(update_fields=["confirmed", "updated_at"])
        logger.info("Article %s confirmed by %s", article.pk, _actor_label(actor))
    return article


def edit(actor, article_id, fields: ArticleFields) -> Article:
    article = _load_owned(actor, article_id, ACTIVE_STATES, "edit")
    fields.validate(TITLE_MAX_LENGTH)
    article.title = fields.title
    article.content = fields.content
    article.save(update_fields=["title", "content", "updated_at"])
    logger.info("Article %s edited by %s", article.pk, _actor_label(actor))
    return article


def soft_delete(actor, article_id) -> Article:
    """Move an article to its owner's trash; ``confirmed`` is left as it is."""
    article = _load_owned(actor, article_id, ACTIVE_STATES, "soft_delete")
    article.soft_delete()
    logger.info("Article %s trashed by %s", article.pk, _actor_label(actor))
    return article


def restore(actor, article_id) -> Article:
    article = _load_owned(actor, article_id, TRASHED_STATES, "restore")
    article.restore()
    logger.info("Article %s restored by %s", article.pk, _actor_label(actor))
    return article


def force_delete(actor, article_id) -> None:
    """Erase a trashed article for good."""
    article = _load_owned(actor, article_id, TRASHED_STATES, "force_delete")
    article.delete()
    logger.info("Article %s permanently deleted by %s", article_id, _actor_label(actor))


def get_readable(actor, article_id) -> Article:
    """Return the article if ``actor`` may see it; hidden and missing look the same."""
    article = Article.all_objects.filter(pk=article_id).first()
    if article is None or not can_read(actor, article):
        raise ArticleNotFound(article_id)
    return article


def get_owned(actor, article_id, *, trashed: bool = False) -> Article:
    """Fetch an owned article for an edit form or a confirmation step."""
    states = TRASHED_STATES if trashed else ACTIVE_STATES
    return _load_owned(actor, article_id, states, "view_owned")


__all__ = [
    "ArticleFields",
    "ArticleState",
    "CONTENT_MAX_LENGTH",
    "DRAFT_TITLE_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
    "confirm",
    "create_draft",
    "edit",
    "force_delete",
    "get_owned",
    "get_readable",
    "restore",
    "soft_delete",
]
