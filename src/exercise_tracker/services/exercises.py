"""Exercise logging and log queries."""

import logging
import math
import re
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.dates import now_millis, parse_date, to_millis
from exercise_tracker.domain.errors import ValidationError
from exercise_tracker.domain.models import ExerciseEntry, ExerciseLog, ExerciseRecord
from exercise_tracker.services.users import UserService

logger = logging.getLogger(__name__)

DEFAULT_LOG_FROM = "1970-01-01"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class ExerciseRepository(Protocol):
    """Persistence interface for exercises."""

    def create_exercise(
        self, user_id: UUID, description: str, duration: float, date: int
    ) -> ExerciseRecord:
        """Create and return an exercise record."""

    def list_exercises(
        self, user_id: UUID, start: int, end: int, limit: int | None
    ) -> list[ExerciseRecord]:
        """Return a user's exercises with ``start <= date < end``, oldest first."""


def _tomorrow() -> datetime:
    return datetime.now(tz=UTC) + timedelta(days=1)


@dataclass
class ExerciseService:
    """Service for adding exercises and reading exercise logs.

    ``log_until`` is the default upper bound for log queries and is fixed
    when the service is constructed.
    """

    users: UserService
    repository: ExerciseRepository
    log_until: datetime = field(default_factory=_tomorrow)

    def add(
        self,
        user_id: str | None,
        description: str | None,
        duration: str | float | None,
        date: str | None = None,
    ) -> ExerciseEntry:
        """Log an exercise for an existing user."""
        user = self.users.get(user_id)
        if not description or not description.strip():
            raise ValidationError.for_field("description", "description is required")
        minutes = parse_duration(duration)
        timestamp = now_millis() if not date else parse_date(date)
        exercise = self.repository.create_exercise(
            user_id=user.id,
            description=description,
            duration=minutes,
            date=timestamp,
        )
        logger.info(
            "Logged exercise",
            extra={"user_id": str(user.id), "exercise_id": str(exercise.id)},
        )
        return ExerciseEntry(user=user, exercise=exercise)

    def log(
        self,
        user_id: str | None,
        date_from: str | None = None,
        date_to: str | None = None,
        limit: str | int | None = None,
    ) -> ExerciseLog:
        """Return a user's exercises in ``[date_from, date_to)``."""
        user = self.users.get(user_id)
        start = parse_date(date_from or DEFAULT_LOG_FROM, field="from")
        end = parse_date(date_to, field="to") if date_to else to_millis(self.log_until)
        exercises = self.repository.list_exercises(
            user.id, start=start, end=end, limit=parse_limit(limit)
        )
        return ExerciseLog(
            user=user, exercises=sorted(exercises, key=lambda item: item.date)
        )


def parse_duration(value: str | float | None) -> float:
    """Coerce a duration in minutes to a finite number."""
    if value is None or isinstance(value, bool) or value == "":
        raise ValidationError.for_field("duration", "duration is required")
    try:
        minutes = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError.for_field(
            "duration", f"duration must be a number, got {value!r}"
        ) from exc
    if not math.isfinite(minutes):
        raise ValidationError.for_field(
            "duration", f"duration must be a number, got {value!r}"
        )
    return minutes


def parse_limit(value: str | int | None) -> int | None:
    """Parse a result limit; ``None`` means unlimited.

    Only a leading integer is read, so ``"5abc"`` limits to 5. Anything
    without one, and zero, is unlimited. Negative values limit to their
    absolute value.
    """
    if value is None:
        return None
    if isinstance(value, int):
        parsed = value
    else:
        match = _LEADING_INT.match(value)
        if not match:
            return None
        parsed = int(match.group(1))
    return abs(parsed) or None
