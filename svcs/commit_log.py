"""Append-only commit history for SVCS, stored in ``vcs/log.txt``.

Each entry renders as four lines and entries are stored newest-first::

    commit 3a7bd3e2360a3d29eea436fcfb7e44c735d117c42d1c1835420b6b9942dd4f1b
    Author: alice
    init
    <blank>

Logs written by earlier releases lose the blank line after the oldest
entry; :func:`decode_entries` accepts both forms.  A message may span
several lines.  It ends at a blank line that is followed by the next
``commit <fingerprint>`` header or by end of file.
"""
from __future__ import annotations

import logging
import os
import pathlib
import re
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass

from svcs.errors import LogFormatError

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(r"^commit ([0-9a-f]{64})$")
_AUTHOR_PREFIX = "Author:"


@dataclass(frozen=True)
class LogEntry:
    """A single commit record."""

    fingerprint: str
    author: str
    message: str


def encode_entry(entry: LogEntry) -> str:
    """Render *entry* in the four-line log format."""
    return f"commit {entry.fingerprint}\nAuthor: {entry.author}\n{entry.message}\n\n"


def encode_entries(entries: Iterable[LogEntry]) -> str:
    return "".join(encode_entry(e) for e in entries)


def _is_entry_end(lines: list[str], pos: int) -> bool:
    """True if the blank line at *pos* closes the current entry."""
    if lines[pos] != "":
        return False
    for line in lines[pos + 1:]:
        if line == "":
            continue
        return bool(_HEADER_RE.match(line))
    return True


def decode_entries(text: str) -> list[LogEntry]:
    """Parse log *text* into entries, preserving newest-first order.

    Raises:
        LogFormatError: The text does not follow the log format.
    """
    lines = text.split("\n")
    entries: list[LogEntry] = []
    pos = 0
    while pos < len(lines):
        line = lines[pos]
        if line == "":
            pos += 1
            continue
        header = _HEADER_RE.match(line)
        if header is None:
            raise LogFormatError(f"log.txt line {pos + 1}: expected 'commit <id>', got {line!r}")
        if pos + 1 >= len(lines) or not lines[pos + 1].startswith(_AUTHOR_PREFIX):
            raise LogFormatError(f"log.txt line {pos + 2}: expected 'Author: <name>'")
        author = lines[pos + 1][len(_AUTHOR_PREFIX):].removeprefix(" ")

        pos += 2
        body: list[str] = []
        while pos < len(lines) and not _is_entry_end(lines, pos):
            body.append(lines[pos])
            pos += 1
        entries.append(LogEntry(fingerprint=header.group(1), author=author, message="\n".join(body)))
    return entries


class CommitLog:
    """Newest-first commit history persisted at *path*."""

    def __init__(self, path: pathlib.Path) -> None:
        self.path = path

    def _read_text(self) -> str:
        if not self.path.exists():
            return ""
        with self.path.open(encoding="utf-8", newline="") as fh:
            return fh.read()

    def read_all(self) -> list[LogEntry]:
        """Return every entry, most recent first; empty when there are none."""
        return decode_entries(self._read_text())

    def append(self, entry: LogEntry) -> None:
        """Insert *entry* at the head of the log.

        The file is replaced atomically so a failed write never truncates
        the existing history.
        """
        content = encode_entry(entry) + self._read_text()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                fh.write(content)
            os.replace(tmp_path, self.path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
        logger.debug("✅ Logged commit %s by %r", entry.fingerprint[:8], entry.author)
