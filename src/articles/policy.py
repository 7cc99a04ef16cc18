"""Who may read or change an article.

Both predicates are pure: they look only at the actor and the article they
are given and never touch the database or the request.
"""


def _actor_id(actor):
    if actor is None or not getattr(actor, "is_authenticated", False):
        return None
    return actor.pk


def can_mutate(actor, article) -> bool:
    """Only the owner may confirm, edit, trash, restore or force-delete."""
    actor_id = _actor_id(actor)
    return actor_id is not None and actor_id == article.user_id


def can_read(actor, article) -> bool:
    """Owners see everything they own; everyone else sees published articles only."""
    if can_mutate(actor, article):
        return True
    return article.confirmed and article.deleted_at is None


__all__ = ["can_mutate", "can_read"]
