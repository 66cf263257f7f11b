"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from pantry_tracker.domain.models import UserRecord
from pantry_tracker.errors import ConflictError, InvalidInputError, NotFoundError

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def create_user(self, username: str, name: str | None) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user registration and lookup."""

    repository: UserRepository

    def register(self, username: str, name: str | None = None) -> UserRecord:
        """Register a new user with a unique username."""
        cleaned = username.strip()
        if not cleaned:
            raise InvalidInputError("username must not be empty")
        if self.repository.get_by_username(cleaned) is not None:
            raise ConflictError(f"username {cleaned!r} is already taken")
        user = self.repository.create_user(cleaned, name.strip() if name else None)
        _logger.info("Registered user: user_id=%s", user.id)
        return user

    def get_user(self, user_id: UUID) -> UserRecord:
        """Return an existing user or raise NotFoundError."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError(f"user {user_id} not found")
        return user
