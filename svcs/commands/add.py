"""svcs add — register a file in the index or list tracked files.

``svcs add`` lists the index; ``svcs add <path>`` starts tracking *path*,
which must name a file inside the working directory.  Adding an already
tracked file reports success and leaves the index unchanged.  The success
message echoes the normalised path that was stored.
"""
from __future__ import annotations

import typer

from svcs._repo import require_repository
from svcs.errors import UNSUPPORTED_OPERATION
from svcs.index import TrackedFileIndex, normalize_tracked_path


def run_add(arguments: list[str]) -> None:
    """Entry point for ``svcs add``; *arguments* are the positional args."""
    repo = require_repository()
    index = TrackedFileIndex(repo.index_path)

    if not arguments:
        tracked = index.read()
        if tracked:
            typer.echo("Tracked files:")
            for path in tracked:
                typer.echo(path)
        else:
            typer.echo("Add a file to the index.")
        return

    if len(arguments) > 1:
        typer.echo(UNSUPPORTED_OPERATION)
        return

    raw = arguments[0]
    rel_path = normalize_tracked_path(repo, raw)
    if rel_path is None:
        typer.echo(f"Can't find '{raw}'.")
        return
    index.add(rel_path)
    typer.echo(f"The file '{rel_path}' is tracked.")
