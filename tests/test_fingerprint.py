"""Unit tests for svcs.fingerprint.

Most tests use an in-memory file map as the reader, so they exercise the
derivation contract without touching disk.
"""
from __future__ import annotations

import hashlib
import pathlib

import pytest

from svcs.fingerprint import (
    NO_FINGERPRINT,
    WorkingTreeReader,
    build_payload,
    compute_fingerprint,
    is_fingerprint,
    sort_tracked_paths,
    split_lines,
)


def _reader(files: dict[str, str]):
    return files.__getitem__


# ---------------------------------------------------------------------------
# sort_tracked_paths
# ---------------------------------------------------------------------------


def test_sort_is_length_first_then_natural() -> None:
    assert sort_tracked_paths(["bb", "a", "ab", "c"]) == ["a", "c", "ab", "bb"]


def test_sort_natural_order_puts_uppercase_first() -> None:
    assert sort_tracked_paths(["b.txt", "B.txt", "a.txt"]) == ["B.txt", "a.txt", "b.txt"]


def test_sort_counts_and_orders_utf16_code_units() -> None:
    # Both are two UTF-16 units long; the surrogate pair (0xD83D...) sorts
    # before U+FFFF even though its code point is larger.
    emoji = "\U0001F600"
    assert sort_tracked_paths(["\uffffa", emoji]) == [emoji, "\uffffa"]


def test_sort_does_not_depend_on_input_order() -> None:
    paths = ["src/main.py", "a.txt", "README", "b.txt"]
    assert sort_tracked_paths(paths) == sort_tracked_paths(list(reversed(paths)))


# ---------------------------------------------------------------------------
# split_lines
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("hello", ["hello"]),
        ("hello\n", ["hello"]),
        ("a\nb", ["a", "b"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\rb", ["a", "b"]),
        ("a\n\nb\n", ["a", "", "b"]),
        ("\n", [""]),
    ],
)
def test_split_lines(text: str, expected: list[str]) -> None:
    assert split_lines(text) == expected


# ---------------------------------------------------------------------------
# build_payload / compute_fingerprint
# ---------------------------------------------------------------------------


def test_payload_concatenates_path_then_joined_lines() -> None:
    files = {"b.txt": "x\ny\n", "a.txt": "hello"}
    assert build_payload(list(files), _reader(files)) == "a.txthellob.txtx, y"


def test_known_fingerprint() -> None:
    files = {"a.txt": "hello"}
    expected = hashlib.sha256(b"a.txthello").hexdigest()
    assert compute_fingerprint(["a.txt"], _reader(files)) == expected


def test_fingerprint_is_lowercase_sha256_hex() -> None:
    fp = compute_fingerprint(["a.txt"], _reader({"a.txt": "data"}))
    assert len(fp) == 64
    assert is_fingerprint(fp)


def test_empty_list_has_no_fingerprint() -> None:
    def _fail(path: str) -> str:
        raise AssertionError("nothing should be read for an empty list")

    assert compute_fingerprint([], _fail) == NO_FINGERPRINT


def test_fingerprint_is_deterministic() -> None:
    files = {"a.txt": "one\ntwo\n", "dir/b.txt": "three"}
    first = compute_fingerprint(list(files), _reader(files))
    second = compute_fingerprint(list(reversed(list(files))), _reader(dict(files)))
    assert first == second


def test_single_character_change_changes_fingerprint() -> None:
    before = compute_fingerprint(["a.txt"], _reader({"a.txt": "hello"}))
    after = compute_fingerprint(["a.txt"], _reader({"a.txt": "hellp"}))
    assert before != after


def test_tracked_set_change_changes_fingerprint() -> None:
    files = {"a.txt": "hello", "b.txt": "world"}
    one = compute_fingerprint(["a.txt"], _reader(files))
    both = compute_fingerprint(["a.txt", "b.txt"], _reader(files))
    assert one != both


def test_trailing_newline_does_not_change_fingerprint() -> None:
    plain = compute_fingerprint(["a.txt"], _reader({"a.txt": "hello"}))
    terminated = compute_fingerprint(["a.txt"], _reader({"a.txt": "hello\n"}))
    assert plain == terminated


def test_reader_errors_propagate() -> None:
    def _unreadable(path: str) -> str:
        raise PermissionError(path)

    with pytest.raises(PermissionError):
        compute_fingerprint(["secret.txt"], _unreadable)


@pytest.mark.parametrize(
    "value, ok",
    [
        ("0" * 64, True),
        ("a" * 63, False),
        ("A" * 64, False),
        ("..", False),
        ("g" * 64, False),
    ],
)
def test_is_fingerprint(value: str, ok: bool) -> None:
    assert is_fingerprint(value) is ok


# ---------------------------------------------------------------------------
# WorkingTreeReader
# ---------------------------------------------------------------------------


def test_working_tree_reader_matches_in_memory(tmp_path: pathlib.Path) -> None:
    (tmp_path / "a.txt").write_text("hello\nworld\n", encoding="utf-8")
    on_disk = compute_fingerprint(["a.txt"], WorkingTreeReader(tmp_path))
    in_memory = compute_fingerprint(["a.txt"], _reader({"a.txt": "hello\nworld"}))
    assert on_disk == in_memory


def test_working_tree_reader_replaces_malformed_utf8(tmp_path: pathlib.Path) -> None:
    (tmp_path / "blob.bin").write_bytes(b"ok\xff")
    assert WorkingTreeReader(tmp_path)("blob.bin") == "ok\ufffd"


def test_working_tree_reader_missing_file_raises(tmp_path: pathlib.Path) -> None:
    with pytest.raises(FileNotFoundError):
        WorkingTreeReader(tmp_path)("missing.txt")
