"""svcs commit — snapshot the tracked files under a content fingerprint.

Usage::

    svcs commit "<message>"

Prints one of:

- ``Changes are committed.`` — a new snapshot and log entry were written.
- ``Nothing to commit.`` — the index is empty, or a snapshot with the same
  fingerprint already exists.
- ``Message was not passed.`` — no message argument.

Quote multi-word messages; more than one argument is rejected with
``Unsupported operation!``.
"""
from __future__ import annotations

import logging

import typer

from svcs._repo import require_repository
from svcs.controller import SnapshotController
from svcs.errors import UNSUPPORTED_OPERATION, ExitCode, SvcsError

logger = logging.getLogger(__name__)


def run_commit(arguments: list[str]) -> None:
    """Entry point for ``svcs commit``; *arguments* are the positional args."""
    repo = require_repository()

    if len(arguments) > 1:
        typer.echo(UNSUPPORTED_OPERATION)
        return

    controller = SnapshotController(repo)
    try:
        result = controller.commit(arguments[0] if arguments else None)
    except SvcsError as exc:
        typer.echo(exc.message)
        raise typer.Exit(code=exc.exit_code)
    except OSError as exc:
        typer.echo(f"❌ svcs commit failed: {exc}")
        logger.error("❌ svcs commit error: %s", exc, exc_info=True)
        raise typer.Exit(code=ExitCode.INTERNAL_ERROR)

    typer.echo("Changes are committed." if result.committed else "Nothing to commit.")
