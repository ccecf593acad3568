"""Supabase repository for exercises."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from exercise_tracker.adapters.supabase_queries import execute
from exercise_tracker.domain.errors import StorageError
from exercise_tracker.domain.models import ExerciseRecord
from exercise_tracker.services.exercises import ExerciseRepository

_COLUMNS = "id, user_id, description, duration, date"


@dataclass
class SupabaseExerciseRepository(ExerciseRepository):
    """Supabase implementation for exercise persistence."""

    client: Client

    def create_exercise(
        self, user_id: UUID, description: str, duration: float, date: int
    ) -> ExerciseRecord:
        """Create an exercise row and return it."""
        response = execute(
            self.client.table("exercises").insert(
                {
                    "user_id": str(user_id),
                    "description": description,
                    "duration": duration,
                    "date": date,
                }
            ),
            "create exercise",
        )
        if not response.data:
            raise StorageError("Failed to create exercise")
        return _parse_row(response.data[0])

    def list_exercises(
        self, user_id: UUID, start: int, end: int, limit: int | None
    ) -> list[ExerciseRecord]:
        """Return a user's exercises in ``[start, end)``, oldest first."""
        query = (
            self.client.table("exercises")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start)
            .lt("date", end)
            .order("date", desc=False)
        )
        if limit is not None:
            query = query.limit(limit)
        response = execute(query, "list exercises")
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> ExerciseRecord:
    return ExerciseRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        description=str(row.get("description", "")),
        duration=float(row.get("duration", 0.0)),
        date=int(row["date"]),
    )
