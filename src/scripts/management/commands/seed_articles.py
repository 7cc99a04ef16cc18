"""Seed demo accounts and articles in every lifecycle state."""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from articles import lifecycle
from articles.lifecycle import ArticleFields

DEMO_ACCOUNTS = {
    "admin@example.com": {"name": "Admin", "password": "adminpass", "is_staff": True},
    "alice@example.com": {"name": "Alice", "password": "alicepass", "is_staff": False},
    "bob@example.com": {"name": "Bob", "password": "bobpass1", "is_staff": False},
}


def create_demo_users() -> dict:
    """Create the demo accounts if missing and return an email -> User map."""
    User = get_user_model()
    users = {}
    for email, account in DEMO_ACCOUNTS.items():
        user = User.objects.filter(email=email).first()
        if user is None:
            create = User.objects.create_staff if account["is_staff"] else User.objects.create_user
            user = create(email=email, password=account["password"], name=account["name"])
        users[email] = user
    return users


def create_demo_articles(author) -> list:
    """Give ``author`` one draft, one published and one trashed article."""
    draft = lifecycle.create_draft(author, ArticleFields(title="Draft", content="Not published yet."))
    published = lifecycle.create_draft(author, ArticleFields(title="Hi", content="Hello world"))
    lifecycle.confirm(author, published.pk)
    trashed = lifecycle.create_draft(author, ArticleFields(title="Old", content="Sent to the trash."))
    lifecycle.confirm(author, trashed.pk)
    lifecycle.soft_delete(author, trashed.pk)
    return [draft, published, trashed]


class Command(BaseCommand):
    help = (
        "Seed demo users and articles (draft, published, trashed) for each non-staff user. "
        "Use --reset to remove the demo users and their articles first."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete the demo users (and, by cascade, their articles) before seeding.",
        )

    def handle(self, *args, **options):
        User = get_user_model()
        if options.get("reset"):
            deleted, _ = User.objects.filter(email__in=DEMO_ACCOUNTS).delete()
            self.stdout.write(self.style.WARNING(f"Removed {deleted} demo rows."))

        users = create_demo_users()
        for email, user in users.items():
            if user.is_staff or user.articles.exists():
                continue
            articles = create_demo_articles(user)
            self.stdout.write(f"Seeded {len(articles)} articles for {email}.")
        self.stdout.write(self.style.SUCCESS("Article seed completed."))
