"""Error types surfaced by services and rendered by the API."""


class ExerciseTrackerError(Exception):
    """Base error carrying an HTTP status and a user-facing message."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(
        self, message: str | None = None, status_code: int | None = None
    ) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ExerciseTrackerError):
    """Invalid or missing input, keyed by field name."""

    status_code = 400

    def __init__(self, errors: dict[str, str]) -> None:
        if not errors:
            raise ValueError("ValidationError requires at least one field error")
        self.errors = dict(errors)
        super().__init__(next(iter(self.errors.values())))

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls({field: message})


class NotFoundError(ExerciseTrackerError):
    """Referenced resource does not exist."""

    status_code = 404
    default_message = "not found"


class StorageError(ExerciseTrackerError):
    """Persistence backend failed for reasons unrelated to the input."""
