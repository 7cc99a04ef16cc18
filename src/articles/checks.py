"""System checks for article configuration."""

from django.core import checks


@checks.register()
def draft_title_limit_matches_edit_limit(app_configs, **kwargs):
    """Warn while drafts accept shorter titles than edits do.

    An article drafted with a 5-character title can later be renamed to
    255 characters, so one of the two limits is probably wrong.
    """
    from .lifecycle import DRAFT_TITLE_MAX_LENGTH, TITLE_MAX_LENGTH

    if DRAFT_TITLE_MAX_LENGTH == TITLE_MAX_LENGTH:
        return []
    return [
        checks.Warning(
            f"Draft titles are limited to {DRAFT_TITLE_MAX_LENGTH} characters but edited "
            f"titles to {TITLE_MAX_LENGTH}.",
            hint="Decide on a single title length and set both limits in articles.lifecycle.",
            id="articles.W001",
        )
    ]
