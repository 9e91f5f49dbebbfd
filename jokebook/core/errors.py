"""Error types raised by the joke store and its repositories."""
from __future__ import annotations


class JokebookError(Exception):
    """Base error carrying a short code and the HTTP status it maps to."""

    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class CategoryNotFoundError(JokebookError):
    """Raised when a category is unknown (or has no jokes to pick from)."""

    # Reported as a regular 200 response carrying an error body.
    def __init__(self, message: str):
        super().__init__(message, "not_found", 200)


class JokeValidationError(JokebookError):
    """Raised when joke/response text or a category name is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(message, "invalid", 400)


class CategoryExistsError(JokebookError):
    """Raised when registering a category name that is already taken."""

    def __init__(self, message: str):
        super().__init__(message, "exists", 409)


class StorageError(JokebookError):
    """Raised when the durable backend fails."""

    def __init__(self, message: str = "storage error"):
        super().__init__(message, "storage", 500)
