"""svcs checkout — restore a stored snapshot into the working directory.

Usage::

    svcs checkout <fingerprint>

Every file in the snapshot overwrites the file at the same path in the
working directory.  Files the snapshot does not contain are never touched
or removed.  An unknown fingerprint prints ``Commit does not exist.`` and
writes nothing.
"""
from __future__ import annotations

import logging

import typer

from svcs._repo import require_repository
from svcs.controller import SnapshotController
from svcs.errors import UNSUPPORTED_OPERATION, ExitCode, SvcsError

logger = logging.getLogger(__name__)


def run_checkout(arguments: list[str]) -> None:
    """Entry point for ``svcs checkout``; *arguments* are the positional args."""
    repo = require_repository()

    if len(arguments) > 1:
        typer.echo(UNSUPPORTED_OPERATION)
        return

    controller = SnapshotController(repo)
    try:
        result = controller.checkout(arguments[0] if arguments else None)
    except SvcsError as exc:
        typer.echo(exc.message)
        raise typer.Exit(code=exc.exit_code)
    except OSError as exc:
        typer.echo(f"❌ svcs checkout failed: {exc}")
        logger.error("❌ svcs checkout error: %s", exc, exc_info=True)
        raise typer.Exit(code=ExitCode.INTERNAL_ERROR)

    typer.echo(f"Switched to commit {result.fingerprint}.")
