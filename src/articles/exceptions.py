"""Outcomes of article lifecycle operations that are not a plain success."""


class ArticleNotFound(Exception):
    """The article does not exist, or exists but the actor may not see it."""


class ArticlePermissionDenied(Exception):
    """The actor is not the owner of the article it tried to mutate."""


class ArticleValidationError(Exception):
    """Submitted fields violate the article constraints.

    ``errors`` maps a field name to the list of messages for that field.
    """

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__(errors)
        self.errors = errors


__all__ = ["ArticleNotFound", "ArticlePermissionDenied", "ArticleValidationError"]
