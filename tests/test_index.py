"""Tests for svcs.index — the tracked-file list."""
from __future__ import annotations

from svcs._repo import RepositoryHandle
from svcs.index import TrackedFileIndex, normalize_tracked_path


def test_index_preserves_insertion_order(repo: RepositoryHandle) -> None:
    index = TrackedFileIndex(repo.index_path)
    assert index.add("b.txt")
    assert index.add("a.txt")
    assert index.read() == ["b.txt", "a.txt"]
    assert repo.index_path.read_text() == "b.txt\na.txt"


def test_index_rejects_duplicates(repo: RepositoryHandle) -> None:
    index = TrackedFileIndex(repo.index_path)
    index.add("a.txt")
    assert index.add("a.txt") is False
    assert index.read() == ["a.txt"]


def test_index_reads_legacy_file_with_duplicates_and_crlf(repo: RepositoryHandle) -> None:
    repo.index_path.write_bytes(b"a.txt\r\nb.txt\r\na.txt\r\n\r\n")
    assert TrackedFileIndex(repo.index_path).read() == ["a.txt", "b.txt"]


def test_normalize_accepts_nested_file(repo: RepositoryHandle) -> None:
    (repo.work_dir / "src").mkdir()
    (repo.work_dir / "src" / "main.py").write_text("print()")
    assert normalize_tracked_path(repo, "src/../src/main.py") == "src/main.py"


def test_normalize_rejects_missing_and_directories(repo: RepositoryHandle) -> None:
    (repo.work_dir / "folder").mkdir()
    assert normalize_tracked_path(repo, "missing.txt") is None
    assert normalize_tracked_path(repo, "folder") is None
    assert normalize_tracked_path(repo, "   ") is None


def test_normalize_rejects_paths_outside_work_dir(repo: RepositoryHandle) -> None:
    outside = repo.work_dir.parent / "outside.txt"
    outside.write_text("nope")
    assert normalize_tracked_path(repo, "../outside.txt") is None
    assert normalize_tracked_path(repo, str(outside)) is None


def test_normalize_rejects_repository_files(repo: RepositoryHandle) -> None:
    assert normalize_tracked_path(repo, "vcs/log.txt") is None


def test_index_keeps_surrounding_spaces_in_names(repo: RepositoryHandle) -> None:
    index = TrackedFileIndex(repo.index_path)
    index.add(" a.txt ")
    index.add("a.txt")
    assert index.read() == [" a.txt ", "a.txt"]


def test_index_splits_only_on_line_terminators(repo: RepositoryHandle) -> None:
    repo.index_path.write_text("a\x0cb.txt\nc\u2028d.txt\n\n", encoding="utf-8")
    assert TrackedFileIndex(repo.index_path).read() == ["a\x0cb.txt", "c\u2028d.txt"]
