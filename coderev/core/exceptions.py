"""Custom exceptions for the review pipeline and the API layer."""


class ApiException(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ReviewFailedError(ApiException):
    """A review request could not be completed."""

    def __init__(self, message: str) -> None:
        super().__init__(500, message)


class ReviewError(Exception):
    """Base exception for review pipeline failures."""


class CloneError(ReviewError):
    """Cloning or reading the repository failed."""


class EmptyResponseError(ReviewError):
    """The model returned no content."""

    def __init__(self, message: str = "No response from AI model") -> None:
        super().__init__(message)


class ResponseParseError(ReviewError):
    """The model content is not valid JSON."""


class ResponseValidationError(ReviewError):
    """The parsed model output does not match the review schema."""


class ReviewTimeoutError(ReviewError):
    """A configured clone or model timeout elapsed."""

    def __init__(self, operation: str, seconds: float) -> None:
        super().__init__(f"{operation} timed out after {seconds:g}s")
