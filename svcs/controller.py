"""Snapshot/restore controller — the orchestration behind commit, checkout and log.

Commit
------
1. Read the tracked-file list from the index.
2. Empty list → nothing to commit.
3. Compute the fingerprint of the tracked files.
4. Snapshot already stored → nothing to commit.  Identical tracked content
   never produces a second snapshot or a second log entry.
5. Store the snapshot, then prepend a log entry.

Checkout
--------
Copies every file of a stored snapshot back into the working directory,
overwriting files at the same paths.  Files that are not in the snapshot
are left untouched; checkout never deletes anything.

Errors: missing arguments raise :class:`~svcs.errors.UserInputError`,
unknown fingerprints raise :class:`~svcs.errors.SnapshotNotFoundError`
before any write, and ``OSError`` from reading or copying files propagates.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from svcs._repo import RepositoryHandle
from svcs.commit_log import CommitLog, LogEntry
from svcs.config import get_username
from svcs.errors import SnapshotNotFoundError, UserInputError
from svcs.fingerprint import NO_FINGERPRINT, TextReader, WorkingTreeReader, compute_fingerprint
from svcs.index import TrackedFileIndex
from svcs.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)

MISSING_MESSAGE = "Message was not passed."
MISSING_FINGERPRINT = "Commit id was not passed."


class CommitStatus(str, enum.Enum):
    """Outcome of a commit attempt."""

    COMMITTED = "committed"
    NOTHING_TO_COMMIT = "nothing_to_commit"


@dataclass(frozen=True)
class CommitResult:
    status: CommitStatus
    fingerprint: str = NO_FINGERPRINT
    entry: LogEntry | None = None

    @property
    def committed(self) -> bool:
        return self.status is CommitStatus.COMMITTED


@dataclass(frozen=True)
class CheckoutResult:
    fingerprint: str
    files_written: list[str] = field(default_factory=list)


class SnapshotController:
    """Commit, checkout and log for one repository.

    Args:
        repo:   Resolved repository paths.
        reader: Source of tracked-file text for fingerprinting.  Defaults to
                reading from ``repo.work_dir``.
    """

    def __init__(self, repo: RepositoryHandle, reader: TextReader | None = None) -> None:
        self.repo = repo
        self.index = TrackedFileIndex(repo.index_path)
        self.store = SnapshotStore(repo.commits_dir)
        self.commit_log = CommitLog(repo.log_path)
        self.reader: TextReader = reader or WorkingTreeReader(repo.work_dir)

    def commit(self, message: str | None, author: str | None = None) -> CommitResult:
        """Snapshot the tracked files if they changed since any earlier commit.

        Args:
            message: Commit message; ``None`` means it was not supplied.
            author:  Author to record.  Defaults to the configured username.

        Raises:
            UserInputError: *message* is ``None``.
            OSError: A tracked file could not be read or copied.
        """
        if message is None:
            raise UserInputError(MISSING_MESSAGE)

        tracked = self.index.read()
        fingerprint = compute_fingerprint(tracked, self.reader)
        if fingerprint == NO_FINGERPRINT:
            logger.info("⚠️ Index is empty, nothing to commit")
            return CommitResult(CommitStatus.NOTHING_TO_COMMIT)

        if self.store.exists(fingerprint):
            logger.info("⚠️ Snapshot %s already stored, nothing to commit", fingerprint[:8])
            return CommitResult(CommitStatus.NOTHING_TO_COMMIT, fingerprint=fingerprint)

        self.store.create(fingerprint, tracked, self.repo.work_dir)

        entry = LogEntry(
            fingerprint=fingerprint,
            author=get_username(self.repo) if author is None else author,
            message=message,
        )
        self.commit_log.append(entry)
        logger.info("✅ svcs commit %s: %s", fingerprint[:8], message)
        return CommitResult(CommitStatus.COMMITTED, fingerprint=fingerprint, entry=entry)

    def checkout(self, fingerprint: str | None) -> CheckoutResult:
        """Restore the snapshot named by *fingerprint* into the working directory.

        Raises:
            UserInputError: *fingerprint* is ``None``.
            SnapshotNotFoundError: No snapshot is stored under *fingerprint*.
            OSError: A file could not be copied.
        """
        if fingerprint is None:
            raise UserInputError(MISSING_FINGERPRINT)

        requested = fingerprint.strip().lower()
        if not self.store.exists(requested):
            raise SnapshotNotFoundError(fingerprint)

        written = self.store.restore(requested, self.repo.work_dir)
        logger.info("✅ svcs checkout %s (%d file(s))", requested[:8], len(written))
        return CheckoutResult(fingerprint=requested, files_written=written)

    def log(self) -> list[LogEntry]:
        """Return all commit-log entries, most recent first."""
        return self.commit_log.read_all()
