"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from exercise_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from exercise_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from exercise_tracker.config import Settings
from exercise_tracker.services.exercises import ExerciseService
from exercise_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    exercise_service: ExerciseService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    exercise_service = ExerciseService(
        users=user_service,
        repository=SupabaseExerciseRepository(supabase_client),
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        exercise_service=exercise_service,
    )
