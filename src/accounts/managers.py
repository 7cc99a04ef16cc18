"""User manager storing bcrypt password hashes."""

import uuid

import bcrypt
from django.contrib.auth.base_user import BaseUserManager


class UserManager(BaseUserManager):
    """Create users and staff accounts with bcrypt-hashed passwords."""

    use_in_migrations = True

    def create_user(self, email: str, password: str | None = None, **extra_fields):
        """Create a regular (non-staff) user."""
        extra_fields.setdefault("is_staff", False)
        return self._create(email, password, **extra_fields)

    def create_staff(self, email: str, password: str | None = None, **extra_fields):
        """Create an administrator allowed on the admin article surface."""
        extra_fields["is_staff"] = True
        return self._create(email, password, **extra_fields)

    def _create(self, email: str, password: str | None, **extra_fields):
        if not email:
            raise ValueError("The Email must be set")
        if password is None:
            raise ValueError("Password must be provided")
        user = self.model(id=uuid.uuid4(), email=self.normalize_email(email), **extra_fields)
        user.password_hash = hash_password(password)
        user.save(using=self._db)
        return user


def hash_password(raw_password: str) -> str:
    return bcrypt.hashpw(raw_password.encode(), bcrypt.gensalt()).decode()


def verify_password(password_hash: str, raw_password: str) -> bool:
    """Compare a raw password against a stored bcrypt hash."""
    if not password_hash:
        return False
    return bcrypt.checkpw(raw_password.encode(), password_hash.encode("utf-8"))


__all__ = ["UserManager", "hash_password", "verify_password"]
