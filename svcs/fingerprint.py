"""Pure fingerprint derivation for ``svcs commit``.

Nothing here writes to disk.  The only I/O is reading tracked files, and
that goes through a ``read_text`` callable so the derivation can be
unit-tested against an in-memory file map.

Derivation contract (must stay byte-for-byte stable, every stored commit
directory is named after it)::

    ordered     = sorted(paths, key=(utf16_length(path), utf16_units(path)))
    payload     = "".join(path + ", ".join(lines(path)) for path in ordered)
    fingerprint = sha256(payload.encode("utf-8")).hexdigest()

``lines(path)`` splits the file text on ``\\n``, ``\\r\\n`` or ``\\r``
and drops the empty piece after a final terminator, so ``"a\\nb\\n"`` and
``"a\\nb"`` hash the same.  An empty path list has no fingerprint at all.
"""
from __future__ import annotations

import hashlib
import logging
import pathlib
import re
from collections.abc import Callable, Iterable, Sequence

logger = logging.getLogger(__name__)

NO_FINGERPRINT = ""
LINE_SEPARATOR = ", "

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_FINGERPRINT_RE = re.compile(r"^[0-9a-f]{64}$")

TextReader = Callable[[str], str]


def is_fingerprint(value: str) -> bool:
    """Return ``True`` if *value* is a 64-char lowercase hex digest."""
    return bool(_FINGERPRINT_RE.match(value))


def _utf16_key(path: str) -> tuple[int, bytes]:
    # Length and ordering are compared in UTF-16 code units; this only
    # differs from plain str ordering for characters outside the BMP.
    units = path.encode("utf-16-be")
    return len(units) // 2, units


def sort_tracked_paths(paths: Iterable[str]) -> list[str]:
    """Return *paths* ordered by length, then by natural string order."""
    return sorted(paths, key=_utf16_key)


def split_lines(text: str) -> list[str]:
    """Split *text* into lines without their terminators.

    A trailing terminator does not yield an empty last line, and the empty
    string has no lines.
    """
    lines = _LINE_BREAK_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def build_payload(paths: Sequence[str], read_text: TextReader) -> str:
    """Return the exact string that is hashed for *paths*."""
    parts: list[str] = []
    for path in sort_tracked_paths(paths):
        parts.append(path)
        parts.append(LINE_SEPARATOR.join(split_lines(read_text(path))))
    return "".join(parts)


def compute_fingerprint(paths: Sequence[str], read_text: TextReader) -> str:
    """Return the fingerprint of the tracked files named by *paths*.

    Returns :data:`NO_FINGERPRINT` for an empty list; an empty index is
    "nothing to commit", never a valid zero-content snapshot.  Any error
    raised by *read_text* propagates unchanged.
    """
    if not paths:
        return NO_FINGERPRINT
    payload = build_payload(paths, read_text)
    fingerprint = hashlib.sha256(payload.encode("utf-8")).hexdigest()
    logger.debug("✅ Fingerprint %s over %d file(s)", fingerprint[:8], len(paths))
    return fingerprint


class WorkingTreeReader:
    """Read tracked files from a working directory on disk.

    Text is decoded as UTF-8; malformed bytes become U+FFFD rather than
    failing, so binary files still fingerprint deterministically.
    """

    def __init__(self, work_dir: pathlib.Path) -> None:
        self.work_dir = work_dir

    def __call__(self, rel_path: str) -> str:
        return (self.work_dir / rel_path).read_bytes().decode("utf-8", errors="replace")
