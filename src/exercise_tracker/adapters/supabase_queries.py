"""Shared helpers for executing Supabase queries."""

import httpx
from supabase import PostgrestAPIError

from exercise_tracker.domain.errors import StorageError


def execute(query, action: str):  # type: ignore[no-untyped-def]
    """Execute a PostgREST query, wrapping backend failures in StorageError."""
    try:
        return query.execute()
    except (PostgrestAPIError, httpx.HTTPError) as exc:
        raise StorageError(f"Failed to {action}") from exc
