"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from exercise_tracker.adapters.supabase_queries import execute
from exercise_tracker.domain.errors import StorageError
from exercise_tracker.domain.models import UserRecord
from exercise_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def create_user(self, username: str) -> UserRecord:
        """Create a new user row and return it."""
        response = execute(
            self.client.table("users").insert({"username": username}),
            "create user",
        )
        if not response.data:
            raise StorageError("Failed to create user")
        return _parse_row(response.data[0])

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = execute(
            self.client.table("users")
            .select("id, username")
            .eq("id", str(user_id))
            .limit(1),
            "look up user",
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by creation time."""
        response = execute(
            self.client.table("users")
            .select("id, username")
            .order("created_at", desc=False),
            "list users",
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> UserRecord:
    return UserRecord(id=UUID(str(row["id"])), username=str(row["username"]))
