"""Repository handle and on-disk layout for SVCS.

Every command operates on a :class:`RepositoryHandle`, a frozen value that
holds the resolved paths of the working directory and of the ``vcs/``
repository directory inside it.  Components receive the handle explicitly;
nothing reads the current directory behind the caller's back.

Layout::

    <work_dir>/
        vcs/
            commits/<fingerprint>/<relative path...>
            log.txt
            index.txt
            config.toml

The layout is created on first use by :func:`open_repository`, so there is
no separate ``init`` command.
"""
from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass

import typer

from svcs.errors import ExitCode, RepositoryError
from svcs.settings import get_settings

logger = logging.getLogger(__name__)

COMMITS_DIR = "commits"
LOG_FILE = "log.txt"
INDEX_FILE = "index.txt"
CONFIG_FILE = "config.toml"
LEGACY_CONFIG_FILE = "config.txt"


@dataclass(frozen=True)
class RepositoryHandle:
    """Resolved paths of one SVCS repository."""

    work_dir: pathlib.Path
    repo_dir: pathlib.Path

    @property
    def commits_dir(self) -> pathlib.Path:
        return self.repo_dir / COMMITS_DIR

    @property
    def log_path(self) -> pathlib.Path:
        return self.repo_dir / LOG_FILE

    @property
    def index_path(self) -> pathlib.Path:
        return self.repo_dir / INDEX_FILE

    @property
    def config_path(self) -> pathlib.Path:
        return self.repo_dir / CONFIG_FILE

    @property
    def legacy_config_path(self) -> pathlib.Path:
        return self.repo_dir / LEGACY_CONFIG_FILE

    @classmethod
    def at(cls, work_dir: pathlib.Path, repo_dir_name: str = "vcs") -> RepositoryHandle:
        """Build a handle for *work_dir* without touching the filesystem."""
        root = work_dir.resolve()
        return cls(work_dir=root, repo_dir=root / repo_dir_name)


def resolve_work_dir(start: pathlib.Path | None = None) -> pathlib.Path:
    """Return the working directory SVCS should operate on.

    ``SVCS_WORK_DIR`` overrides *start*, which defaults to ``Path.cwd()``.
    """
    settings = get_settings()
    if settings.work_dir is not None:
        logger.debug("⚠️ SVCS_WORK_DIR override active: %s", settings.work_dir)
        return settings.work_dir.resolve()
    return (start or pathlib.Path.cwd()).resolve()


def ensure_layout(repo: RepositoryHandle) -> RepositoryHandle:
    """Create any missing directories and empty files of the layout.

    Idempotent.  Raises :class:`RepositoryError` when a path that must be a
    directory exists as a file (or vice versa).
    """
    for directory in (repo.repo_dir, repo.commits_dir):
        if directory.exists() and not directory.is_dir():
            raise RepositoryError(f"{directory} exists and is not a directory.")
        if not directory.exists():
            directory.mkdir(parents=True)
            logger.debug("✅ Created %s", directory)

    for path in (repo.log_path, repo.index_path, repo.config_path):
        if path.exists() and not path.is_file():
            raise RepositoryError(f"{path} exists and is not a file.")
        if not path.exists():
            path.touch()
            logger.debug("✅ Created %s", path)
    return repo


def open_repository(start: pathlib.Path | None = None) -> RepositoryHandle:
    """Resolve the working directory and return a ready-to-use handle."""
    settings = get_settings()
    repo = RepositoryHandle.at(resolve_work_dir(start), settings.repo_dir_name)
    return ensure_layout(repo)


def require_repository(start: pathlib.Path | None = None) -> RepositoryHandle:
    """Return an opened repository or exit 2 with a clear error message.

    Wraps :func:`open_repository` for command callbacks.  The error text is
    echoed to stdout so ``typer.testing.CliRunner`` captures it in
    ``result.output``.
    """
    try:
        return open_repository(start)
    except (RepositoryError, OSError, ValueError) as exc:
        typer.echo(f"❌ Cannot open repository: {exc}")
        logger.error("❌ repository setup failed: %s", exc, exc_info=True)
        raise typer.Exit(code=ExitCode.REPO_ERROR)
