"""Persistence errors."""

from typing import Optional


class RepositoryError(Exception):
    """A storage operation failed. Wraps the underlying driver error."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
