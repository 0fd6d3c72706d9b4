"""Exit-code contract and exception types for SVCS."""
from __future__ import annotations

import enum

UNSUPPORTED_OPERATION = "Unsupported operation!"


class ExitCode(enum.IntEnum):
    """Standardised CLI exit codes.

    0 — success, including reported outcomes such as "Nothing to commit."
        or "Commit does not exist."
    2 — repository layout or commit log unusable
    3 — I/O or internal error
    """

    SUCCESS = 0
    REPO_ERROR = 2
    INTERNAL_ERROR = 3


class SvcsError(Exception):
    """Base exception for SVCS errors."""

    def __init__(self, message: str, exit_code: ExitCode = ExitCode.INTERNAL_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class UserInputError(SvcsError):
    """A required argument is missing or too many were given.

    Reported to the user; the process still exits normally.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=ExitCode.SUCCESS)


class NotFoundError(SvcsError):
    """A referenced object does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=ExitCode.SUCCESS)


class SnapshotNotFoundError(NotFoundError):
    """Raised when no snapshot is stored for a fingerprint."""

    def __init__(self, fingerprint: str) -> None:
        super().__init__("Commit does not exist.")
        self.fingerprint = fingerprint


class SnapshotExistsError(SvcsError):
    """Raised when creating a snapshot whose fingerprint is already stored.

    Snapshots are immutable; callers check ``exists()`` first.
    """

    def __init__(self, fingerprint: str) -> None:
        super().__init__(f"Snapshot {fingerprint[:8]} already exists.")
        self.fingerprint = fingerprint


class LogFormatError(SvcsError):
    """Raised when the commit log cannot be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=ExitCode.REPO_ERROR)


class RepositoryError(SvcsError):
    """Raised when the repository directory layout cannot be set up."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=ExitCode.REPO_ERROR)
