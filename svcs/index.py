"""Tracked-file index for SVCS, stored in ``vcs/index.txt``.

The index is a newline-delimited list of paths relative to the working
directory, in the order they were added, without duplicates.  ``svcs add``
writes it; ``svcs commit`` only reads it.
"""
from __future__ import annotations

import logging
import pathlib

from svcs._repo import RepositoryHandle
from svcs.fingerprint import split_lines

logger = logging.getLogger(__name__)


def normalize_tracked_path(repo: RepositoryHandle, raw: str) -> str | None:
    """Return *raw* as a POSIX path relative to the working directory.

    Returns ``None`` when *raw* does not name a regular file inside the
    working directory, or names something inside the repository directory
    itself.  Never raises.
    """
    if not raw.strip():
        return None
    candidate = (repo.work_dir / raw).resolve()
    try:
        rel = candidate.relative_to(repo.work_dir)
    except ValueError:
        logger.debug("⚠️ %s is outside %s", raw, repo.work_dir)
        return None
    if rel.parts and rel.parts[0] == repo.repo_dir.name:
        return None
    if not candidate.is_file():
        return None
    return rel.as_posix()


class TrackedFileIndex:
    """Ordered, duplicate-free list of tracked paths persisted at *path*."""

    def __init__(self, path: pathlib.Path) -> None:
        self.path = path

    def read(self) -> list[str]:
        """Return tracked paths in insertion order.

        Entries are kept verbatim; only empty lines are skipped, so names with
        leading or trailing spaces survive.
        """
        if not self.path.exists():
            return []
        seen: dict[str, None] = {}
        for entry in split_lines(self.path.read_text(encoding="utf-8")):
            if entry:
                seen.setdefault(entry, None)
        return list(seen)

    def add(self, rel_path: str) -> bool:
        """Append *rel_path* unless already tracked.

        Returns ``True`` when the index changed.
        """
        tracked = self.read()
        if rel_path in tracked:
            logger.debug("⚠️ %s is already tracked", rel_path)
            return False
        tracked.append(rel_path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("\n".join(tracked), encoding="utf-8")
        logger.info("✅ Tracking %s", rel_path)
        return True
