"""Exceptions raised while uploading a file chunk as an issue comment.

Every error is terminal for the call: nothing is retried and no next
offset is produced, so callers keep their stored offset unchanged.
"""
from typing import Optional


class IssueLogError(Exception):
    """Base class for all issuelog errors."""


class ConfigError(IssueLogError):
    """Raised when the comment client cannot be configured (token, repo)."""


class ContentNotFoundError(IssueLogError, FileNotFoundError):
    """Raised when the source file is missing or cannot be opened."""

    def __init__(self, path: str, *, cause: Optional[Exception] = None) -> None:
        super().__init__(f"cannot open {path!r}")
        self.path = path
        self.__cause__ = cause


class ContentReadError(IssueLogError, OSError):
    """Raised on a stat, seek or read failure."""

    def __init__(self, message: str, *, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.__cause__ = cause


class ContentTooLargeError(IssueLogError):
    """Raised when the unread part of the file exceeds the size ceiling."""

    def __init__(self, path: str, unread: int, limit: int) -> None:
        super().__init__(
            f"file is too large: {path!r} has {unread} unread bytes (limit {limit})"
        )
        self.path = path
        self.unread = unread
        self.limit = limit


class PostFailedError(IssueLogError):
    """Raised when the comment could not be posted."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.__cause__ = cause
