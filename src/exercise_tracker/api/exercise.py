"""Exercise tracker API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import pydantic
from fastapi import APIRouter, Query, Request

from exercise_tracker.api.error_handlers import field_errors
from exercise_tracker.api.exercise_models import AddExerciseRequest, NewUserRequest
from exercise_tracker.domain.dates import format_date
from exercise_tracker.domain.errors import ValidationError

if TYPE_CHECKING:
    from exercise_tracker.containers import AppContainer
    from exercise_tracker.domain.models import (
        ExerciseEntry,
        ExerciseLog,
        ExerciseRecord,
        UserRecord,
    )

router = APIRouter(prefix="/api/exercise", tags=["exercise"])

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


@router.post("/new-user")
async def new_user(request: Request) -> dict[str, object]:
    """Create a user from a JSON or form-encoded body."""
    container: AppContainer = request.app.state.container
    body = parse_request(NewUserRequest, await _read_body(request))
    user = container.user_service.create(body.username)
    return _serialize_user(user)


@router.get("/users")
async def list_users(request: Request) -> list[dict[str, object]]:
    """Return every user."""
    container: AppContainer = request.app.state.container
    return [_serialize_user(user) for user in container.user_service.list_all()]


@router.post("/add")
async def add_exercise(request: Request) -> dict[str, object]:
    """Log an exercise; an empty date means now."""
    container: AppContainer = request.app.state.container
    body = parse_request(AddExerciseRequest, await _read_body(request))
    entry = container.exercise_service.add(
        user_id=body.user_id,
        description=body.description,
        duration=body.duration,
        date=body.date,
    )
    return _serialize_entry(entry)


@router.get("/log")
async def exercise_log(
    request: Request,
    user_id: str | None = Query(default=None, alias="userId"),
    date_from: str | None = Query(default=None, alias="from"),
    date_to: str | None = Query(default=None, alias="to"),
    limit: str | None = Query(default=None),
) -> dict[str, object]:
    """Return a user's exercises filtered by date range and limit."""
    container: AppContainer = request.app.state.container
    log = container.exercise_service.log(
        user_id=user_id, date_from=date_from, date_to=date_to, limit=limit
    )
    return _serialize_log(log)


async def _read_body(request: Request) -> dict[str, object]:
    """Read a JSON object or form-encoded body into a dict."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError as exc:
            raise ValidationError.for_field("body", "malformed JSON body") from exc
    else:
        payload = dict(await request.form())
    if not isinstance(payload, dict):
        raise ValidationError.for_field("body", "request body must be an object")
    return payload


def parse_request(model: type[ModelT], payload: object) -> ModelT:
    """Validate a request payload, raising a field-level ValidationError."""
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(field_errors(exc.errors())) from exc


def _format_duration(duration: float) -> float | int:
    return int(duration) if duration.is_integer() else duration


def _serialize_user(user: UserRecord) -> dict[str, object]:
    return {"id": str(user.id), "username": user.username}


def _serialize_entry(entry: ExerciseEntry) -> dict[str, object]:
    return {
        **_serialize_user(entry.user),
        "description": entry.exercise.description,
        "duration": _format_duration(entry.exercise.duration),
        "date": format_date(entry.exercise.date),
    }


def _serialize_exercise(exercise: ExerciseRecord) -> dict[str, object]:
    return {
        "date": format_date(exercise.date),
        "description": exercise.description,
        "duration": _format_duration(exercise.duration),
    }


def _serialize_log(log: ExerciseLog) -> dict[str, object]:
    return {
        **_serialize_user(log.user),
        "count": log.count,
        "log": [_serialize_exercise(exercise) for exercise in log.exercises],
    }
