"""Domain models for the pantry tracker."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a registered user."""

    id: UUID
    username: str
    name: str | None = None
