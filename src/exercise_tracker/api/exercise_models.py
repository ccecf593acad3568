"""Pydantic models for exercise API request bodies."""

from pydantic import BaseModel, ConfigDict, Field


class NewUserRequest(BaseModel):
    """Body of a create-user request."""

    model_config = ConfigDict(extra="ignore")

    username: str | None = None


class AddExerciseRequest(BaseModel):
    """Body of an add-exercise request."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    description: str | None = None
    duration: str | float | None = None
    date: str | None = None
