"""Pytest configuration and fixtures."""
from __future__ import annotations

import pathlib
from collections.abc import Iterator

import pytest

from svcs._repo import RepositoryHandle, open_repository
from svcs.settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop SVCS_* variables from the host and reset the settings cache."""
    for var in ("SVCS_WORK_DIR", "SVCS_REPO_DIR_NAME", "SVCS_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def work_dir(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:
    """A fresh working directory that SVCS resolves via ``SVCS_WORK_DIR``."""
    monkeypatch.setenv("SVCS_WORK_DIR", str(tmp_path))
    get_settings.cache_clear()
    return tmp_path


@pytest.fixture
def repo(work_dir: pathlib.Path) -> RepositoryHandle:
    """An initialised repository inside ``work_dir``."""
    return open_repository()
