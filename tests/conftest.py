"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from exercise_tracker.api.app import create_app
from exercise_tracker.config import Settings
from exercise_tracker.containers import AppContainer
from exercise_tracker.domain.errors import StorageError
from exercise_tracker.domain.models import ExerciseRecord, UserRecord
from exercise_tracker.services.exercises import ExerciseRepository, ExerciseService
from exercise_tracker.services.users import UserRepository, UserService

TEST_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def create_user(self, username: str) -> UserRecord:
        user = UserRecord(id=uuid4(), username=username)
        self.users[user.id] = user
        return user

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def list_users(self) -> list[UserRecord]:
        return list(self.users.values())


@dataclass
class InMemoryExerciseRepository(ExerciseRepository):
    """In-memory exercise repository for tests."""

    exercises: list[ExerciseRecord] = field(default_factory=list)

    def create_exercise(
        self, user_id: UUID, description: str, duration: float, date: int
    ) -> ExerciseRecord:
        exercise = ExerciseRecord(
            id=uuid4(),
            user_id=user_id,
            description=description,
            duration=duration,
            date=date,
        )
        self.exercises.append(exercise)
        return exercise

    def list_exercises(
        self, user_id: UUID, start: int, end: int, limit: int | None
    ) -> list[ExerciseRecord]:
        matches = sorted(
            (
                exercise
                for exercise in self.exercises
                if exercise.user_id == user_id and start <= exercise.date < end
            ),
            key=lambda exercise: exercise.date,
        )
        return matches[:limit] if limit else matches


@dataclass
class FailingUserRepository(UserRepository):
    """User repository whose backend is unavailable."""

    def create_user(self, username: str) -> UserRecord:
        raise StorageError("Failed to create user")

    def get_user(self, user_id: UUID) -> UserRecord | None:
        raise StorageError("Failed to look up user")

    def list_users(self) -> list[UserRecord]:
        raise StorageError("Failed to list users")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=TEST_SERVICE_KEY,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def exercise_repository() -> InMemoryExerciseRepository:
    return InMemoryExerciseRepository()


@pytest.fixture
def user_service(user_repository: InMemoryUserRepository) -> UserService:
    return UserService(user_repository)


@pytest.fixture
def exercise_service(
    user_service: UserService, exercise_repository: InMemoryExerciseRepository
) -> ExerciseService:
    return ExerciseService(users=user_service, repository=exercise_repository)


@pytest.fixture
def container(
    settings: Settings,
    user_service: UserService,
    exercise_service: ExerciseService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=user_service,
        exercise_service=exercise_service,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
