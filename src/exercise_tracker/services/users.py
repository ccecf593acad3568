"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.errors import NotFoundError, ValidationError
from exercise_tracker.domain.models import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def list_users(self) -> list[UserRecord]:
        """Return all users in insertion order."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def create(self, username: str | None) -> UserRecord:
        """Validate and persist a new user."""
        if not username or not username.strip():
            raise ValidationError.for_field("username", "username is required")
        user = self.repository.create_user(username)
        logger.info("Created user", extra={"user_id": str(user.id)})
        return user

    def list_all(self) -> list[UserRecord]:
        """Return every user."""
        return self.repository.list_users()

    def get(self, user_id: str | None) -> UserRecord:
        """Resolve a user id, raising when it is missing or unknown."""
        if not user_id or not user_id.strip():
            raise ValidationError.for_field("userId", "userId is required")
        try:
            parsed = UUID(user_id.strip())
        except ValueError as exc:
            raise NotFoundError("unknown userId") from exc
        user = self.repository.get_user(parsed)
        if user is None:
            raise NotFoundError("unknown userId")
        return user
