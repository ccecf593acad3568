"""Domain models for the exercise tracker."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str


@dataclass(frozen=True)
class ExerciseRecord:
    """A logged exercise; ``date`` is epoch milliseconds."""

    id: UUID
    user_id: UUID
    description: str
    duration: float
    date: int


@dataclass(frozen=True)
class ExerciseEntry:
    """A newly added exercise together with its owner."""

    user: UserRecord
    exercise: ExerciseRecord


@dataclass(frozen=True)
class ExerciseLog:
    """Filtered exercises for a user, sorted by date."""

    user: UserRecord
    exercises: list[ExerciseRecord]

    @property
    def count(self) -> int:
        return len(self.exercises)
