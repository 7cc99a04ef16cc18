"""Lifecycle tests run directly against ``articles.lifecycle`` without HTTP."""

from django.contrib.auth.models import AnonymousUser
from django.core.checks import run_checks
from django.test import TestCase

from articles import lifecycle, listings
from articles.exceptions import ArticleNotFound, ArticlePermissionDenied, ArticleValidationError
from articles.lifecycle import ArticleFields, ArticleState
from articles.models import Article
from tests.utils import create_user


class LifecycleTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.owner = create_user("owner@test.com")
        cls.other = create_user("other@test.com")

    def _draft(self, title="Hi", content="Hello world"):
        return lifecycle.create_draft(self.owner, ArticleFields(title=title, content=content))

    def _published(self):
        article = self._draft()
        return lifecycle.confirm(self.owner, article.pk)

    def test_create_draft_is_unconfirmed_and_owned(self):
        article = self._draft()

        self.assertEqual(ArticleState.of(article), ArticleState.UNCONFIRMED)
        self.assertEqual(article.user_id, self.owner.pk)
        self.assertFalse(article.confirmed)
        self.assertIsNone(article.deleted_at)

    def test_anonymous_cannot_create(self):
        with self.assertRaises(ArticlePermissionDenied):
            lifecycle.create_draft(AnonymousUser(), ArticleFields(title="Hi", content="Hello"))
        self.assertFalse(Article.all_objects.exists())

    def test_draft_title_limited_to_five_characters(self):
        self._draft(title="12345")
        with self.assertRaises(ArticleValidationError) as ctx:
            self._draft(title="123456")
        self.assertIn("title", ctx.exception.errors)

    def test_blank_and_oversized_fields_rejected(self):
        with self.assertRaises(ArticleValidationError) as ctx:
            self._draft(title="  ", content="x" * 5001)
        self.assertEqual(set(ctx.exception.errors), {"title", "content"})

    def test_edit_accepts_titles_up_to_255(self):
        article = self._draft()

        edited = lifecycle.edit(self.owner, article.pk, ArticleFields(title="t" * 255, content="New body"))
        self.assertEqual(len(edited.title), 255)

        with self.assertRaises(ArticleValidationError):
            lifecycle.edit(self.owner, article.pk, ArticleFields(title="t" * 256, content="New body"))
        article.refresh_from_db()
        self.assertEqual(article.content, "New body")

    def test_edit_keeps_state(self):
        article = self._published()
        lifecycle.edit(self.owner, article.pk, ArticleFields(title="Yo", content="Changed"))
        article.refresh_from_db()
        self.assertTrue(article.confirmed)

    def test_non_owner_mutations_denied_and_leave_article_unchanged(self):
        article = self._draft()
        fields = ArticleFields(title="Hack", content="Hacked")

        for operation in (
            lambda: lifecycle.confirm(self.other, article.pk),
            lambda: lifecycle.edit(self.other, article.pk, fields),
            lambda: lifecycle.soft_delete(self.other, article.pk),
        ):
            with self.assertRaises(ArticlePermissionDenied):
                operation()

        lifecycle.soft_delete(self.owner, article.pk)
        for operation in (
            lambda: lifecycle.restore(self.other, article.pk),
            lambda: lifecycle.force_delete(self.other, article.pk),
        ):
            with self.assertRaises(ArticlePermissionDenied):
                operation()

        stored = Article.all_objects.get(pk=article.pk)
        self.assertEqual((stored.title, stored.content), ("Hi", "Hello world"))
        self.assertFalse(stored.confirmed)
        self.assertTrue(stored.is_trashed)

    def test_foreign_edit_with_invalid_fields_is_denied_not_validated(self):
        article = self._draft()
        with self.assertRaises(ArticlePermissionDenied):
            lifecycle.edit(self.other, article.pk, ArticleFields(title="", content=""))

    def test_confirm_is_monotonic_and_idempotent(self):
        article = self._published()
        again = lifecycle.confirm(self.owner, article.pk)
        self.assertTrue(again.confirmed)

        lifecycle.edit(self.owner, article.pk, ArticleFields(title="Yo", content="x"))
        lifecycle.soft_delete(self.owner, article.pk)
        lifecycle.restore(self.owner, article.pk)
        article.refresh_from_db()
        self.assertTrue(article.confirmed)

    def test_restore_preserves_prior_confirmation(self):
        for confirm_first in (False, True):
            with self.subTest(confirmed=confirm_first):
                article = self._published() if confirm_first else self._draft()

                trashed = lifecycle.soft_delete(self.owner, article.pk)
                self.assertEqual(ArticleState.of(trashed), ArticleState.TRASHED)
                self.assertEqual(trashed.confirmed, confirm_first)

                restored = lifecycle.restore(self.owner, article.pk)
                self.assertEqual(restored.confirmed, confirm_first)
                self.assertIsNone(restored.deleted_at)

    def test_actions_in_wrong_state_are_not_found(self):
        article = self._draft()
        with self.assertRaises(ArticleNotFound):
            lifecycle.restore(self.owner, article.pk)
        with self.assertRaises(ArticleNotFound):
            lifecycle.force_delete(self.owner, article.pk)

        lifecycle.soft_delete(self.owner, article.pk)
        with self.assertRaises(ArticleNotFound):
            lifecycle.edit(self.owner, article.pk, ArticleFields(title="Hi", content="x"))
        with self.assertRaises(ArticleNotFound):
            lifecycle.confirm(self.owner, article.pk)

    def test_missing_article_is_not_found(self):
        with self.assertRaises(ArticleNotFound):
            lifecycle.confirm(self.owner, 999999)

    def test_force_delete_erases_record_everywhere(self):
        article = self._published()
        lifecycle.soft_delete(self.owner, article.pk)
        lifecycle.force_delete(self.owner, article.pk)

        self.assertFalse(Article.all_objects.filter(pk=article.pk).exists())
        for actor in (self.owner, self.other, AnonymousUser()):
            with self.assertRaises(ArticleNotFound):
                lifecycle.get_readable(actor, article.pk)
        self.assertFalse(listings.trashed_articles(self.owner).exists())
        self.assertFalse(listings.own_articles(self.owner).exists())
        self.assertFalse(listings.admin_articles().exists())

    def test_visibility_conceals_drafts_and_trash_from_others(self):
        draft = self._draft()
        published = self._published()
        trashed = self._published()
        lifecycle.soft_delete(self.owner, trashed.pk)

        for article in (draft, trashed):
            with self.assertRaises(ArticleNotFound):
                lifecycle.get_readable(self.other, article.pk)
            self.assertEqual(lifecycle.get_readable(self.owner, article.pk).pk, article.pk)
        self.assertEqual(lifecycle.get_readable(self.other, published.pk).pk, published.pk)

    def test_get_owned_requires_owner(self):
        article = self._draft()
        self.assertEqual(lifecycle.get_owned(self.owner, article.pk).pk, article.pk)
        with self.assertRaises(ArticlePermissionDenied):
            lifecycle.get_owned(self.other, article.pk)
        with self.assertRaises(ArticleNotFound):
            lifecycle.get_owned(self.owner, article.pk, trashed=True)

    def test_listings_partition_articles(self):
        draft = self._draft()
        published = self._published()
        trashed = self._published()
        lifecycle.soft_delete(self.owner, trashed.pk)

        self.assertEqual(list(listings.published_articles()), [published])
        self.assertEqual(set(listings.own_articles(self.owner)), {draft, published})
        self.assertEqual(list(listings.trashed_articles(self.owner)), [trashed])
        self.assertEqual(set(listings.admin_articles()), {published, trashed})
        self.assertFalse(listings.own_articles(self.other).exists())
        self.assertEqual(
            listings.state_counts(self.owner), {"unconfirmed": 1, "confirmed": 1, "trashed": 1}
        )


class TitleLimitCheckTests(TestCase):
    def test_discrepant_title_limits_are_flagged(self):
        ids = [message.id for message in run_checks()]
        self.assertIn("articles.W001", ids)
