"""svcs log — print the commit history, most recent first.

Output is the log file format itself::

    commit <fingerprint>
    Author: <author>
    <message>

"""
from __future__ import annotations

import typer

from svcs._repo import require_repository
from svcs.commit_log import encode_entries
from svcs.controller import SnapshotController
from svcs.errors import SvcsError


def run_log() -> None:
    """Entry point for ``svcs log``."""
    repo = require_repository()
    try:
        entries = SnapshotController(repo).log()
    except SvcsError as exc:
        typer.echo(f"❌ {exc.message}")
        raise typer.Exit(code=exc.exit_code)

    if not entries:
        typer.echo("No commits yet.")
        return
    typer.echo(encode_entries(entries), nl=False)
