"""Content-addressed snapshot store for SVCS.

``svcs commit`` and ``svcs checkout`` read and write snapshots only through
this module.

Layout
------
One directory per fingerprint under ``vcs/commits/``; inside it every tracked
file sits at its original relative path, copied byte-for-byte::

    vcs/commits/<fingerprint>/<relative path...>

There is no manifest.  The fingerprint already encodes the tracked-file set
and every file's content, so directory existence *is* the existence check.

Publishing
----------
:meth:`SnapshotStore.create` copies into a hidden staging directory next to
the final location and renames it into place in one step.  A crash mid-copy
leaves only a ``.staging-*`` directory behind, which is never mistaken for a
snapshot because it is not a valid fingerprint.

The store is append-only: snapshots are never overwritten or deleted.
"""
from __future__ import annotations

import logging
import os
import pathlib
import shutil
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass

from svcs.errors import SnapshotExistsError, SnapshotNotFoundError
from svcs.fingerprint import is_fingerprint

logger = logging.getLogger(__name__)

_STAGING_PREFIX = ".staging-"


@dataclass(frozen=True)
class SnapshotFile:
    """One file stored in a snapshot."""

    path: str
    content: bytes


class SnapshotStore:
    """Snapshot directories keyed by fingerprint under *commits_dir*."""

    def __init__(self, commits_dir: pathlib.Path) -> None:
        self.commits_dir = commits_dir

    def snapshot_path(self, fingerprint: str) -> pathlib.Path:
        """Return the directory for *fingerprint* (may not yet exist)."""
        return self.commits_dir / fingerprint

    def exists(self, fingerprint: str) -> bool:
        """Return ``True`` if a snapshot is stored for *fingerprint*.

        Anything that is not a well-formed fingerprint never exists, so
        user input such as ``..`` cannot resolve outside the store.
        """
        if not is_fingerprint(fingerprint):
            return False
        return self.snapshot_path(fingerprint).is_dir()

    def create(
        self,
        fingerprint: str,
        paths: Iterable[str],
        source_root: pathlib.Path,
    ) -> pathlib.Path:
        """Copy *paths* from *source_root* into a new snapshot.

        Args:
            fingerprint: Fingerprint of exactly these files and contents.
            paths:       Relative paths of the tracked files.
            source_root: Working directory the paths are relative to.

        Returns:
            The published snapshot directory.

        Raises:
            SnapshotExistsError: A snapshot for *fingerprint* is already stored.
            ValueError: *fingerprint* is not a 64-char hex digest.
            OSError: A source file could not be read or copied.  Nothing is
                published in that case.
        """
        if not is_fingerprint(fingerprint):
            raise ValueError(f"Not a fingerprint: {fingerprint!r}")
        dest = self.snapshot_path(fingerprint)
        if dest.exists():
            raise SnapshotExistsError(fingerprint)

        self.commits_dir.mkdir(parents=True, exist_ok=True)
        staging = pathlib.Path(
            tempfile.mkdtemp(dir=self.commits_dir, prefix=f"{_STAGING_PREFIX}{fingerprint[:8]}-")
        )
        try:
            count = 0
            for rel_path in paths:
                target = staging / rel_path
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(source_root / rel_path, target)
                count += 1
                logger.debug("✅ Staged %s for snapshot %s", rel_path, fingerprint[:8])
            os.rename(staging, dest)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        logger.info("✅ Stored snapshot %s (%d file(s))", fingerprint[:8], count)
        return dest

    def _require(self, fingerprint: str) -> pathlib.Path:
        if not self.exists(fingerprint):
            logger.debug("⚠️ Snapshot %s not found", fingerprint[:8])
            raise SnapshotNotFoundError(fingerprint)
        return self.snapshot_path(fingerprint)

    def files(self, fingerprint: str) -> list[str]:
        """Return the relative POSIX paths stored in a snapshot, sorted."""
        root = self._require(fingerprint)
        return sorted(
            p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()
        )

    def read(self, fingerprint: str) -> list[SnapshotFile]:
        """Return every file of a snapshot with its content, sorted by path.

        Raises:
            SnapshotNotFoundError: No snapshot is stored for *fingerprint*.
        """
        root = self._require(fingerprint)
        return [SnapshotFile(path=p, content=(root / p).read_bytes()) for p in self.files(fingerprint)]

    def restore(self, fingerprint: str, dest_root: pathlib.Path) -> list[str]:
        """Copy a snapshot's files into *dest_root*, overwriting existing files.

        Files under *dest_root* that are not part of the snapshot are left
        alone.  Parent directories are created as needed.

        Returns:
            Relative paths written, sorted.

        Raises:
            SnapshotNotFoundError: No snapshot is stored for *fingerprint*.
        """
        root = self._require(fingerprint)
        written: list[str] = []
        for rel_path in self.files(fingerprint):
            target = dest_root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(root / rel_path, target)
            written.append(rel_path)
            logger.debug("✅ Restored %s from %s", rel_path, fingerprint[:8])
        return written
