"""Application error taxonomy.

Every error the API reports deliberately derives from ``AppError`` and carries
the HTTP status it maps to. ``app.main`` turns these into ``{"message": ...}``
responses; anything else escaping a route is wrapped as ``InternalError``.
"""


class AppError(Exception):
    """Base class for errors reported to API callers."""

    status_code: int = 500
    retryable: bool = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or missing request fields."""

    status_code = 400


class MissingAnswerError(ValidationError):
    """A required questionnaire answer was not supplied."""

    def __init__(self, question_id: str):
        super().__init__(f"Missing answer for question '{question_id}'")
        self.question_id = question_id


class InvalidAnswerError(ValidationError):
    """A questionnaire answer is not an integer."""

    def __init__(self, question_id: str, value: object):
        super().__init__(f"Answer for question '{question_id}' must be an integer, got {value!r}")
        self.question_id = question_id
        self.value = value


class OutOfRangeError(ValidationError):
    """A questionnaire answer falls outside the 1-5 scale."""

    def __init__(self, question_id: str, value: int, low: int, high: int):
        super().__init__(
            f"Answer for question '{question_id}' must be between {low} and {high}, got {value}"
        )
        self.question_id = question_id
        self.value = value


class UnknownStepError(ValidationError):
    """A wizard step name is not part of the flow."""

    def __init__(self, step: str):
        super().__init__(f"Unknown wizard step '{step}'")
        self.step = step


class NotFoundError(AppError):
    """Referenced project or satellite record is absent."""

    status_code = 404


class UpstreamServiceError(AppError):
    """A third-party service failed; the caller may retry."""

    status_code = 502
    retryable = True


class RecommendationGenerationError(UpstreamServiceError):
    """The LLM recommendation call failed or returned an unusable reply."""


class InternalError(AppError):
    """Persistence or other internal failure. Not retried automatically."""

    status_code = 500
