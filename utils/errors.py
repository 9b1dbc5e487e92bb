# utils/errors.py
"""
Login failures. Each carries the notice title shown to the user;
str(error) is the notice description.
"""


class AuthError(ValueError):
    title = "Error"

    def __init__(self, message: str, title: str = None):
        super().__init__(message)
        if title:
            self.title = title


class ValidationError(AuthError):
    """A required field was empty."""


class LookupFailure(AuthError):
    """The credential store could not be queried."""

    title = "Error"


class NotFound(AuthError):
    title = "Not Found"


class Unauthorized(AuthError):
    title = "Login Failed"


class StorageError(RuntimeError):
    """The stored session identity cookie could not be read."""
