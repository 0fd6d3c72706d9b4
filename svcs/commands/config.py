"""svcs config — get and set the username recorded as commit author.

``svcs config`` prints the current name; ``svcs config <name>`` stores it
in ``vcs/config.toml`` under ``[user] name``.
"""
from __future__ import annotations

import typer

from svcs._repo import require_repository
from svcs.config import get_username, set_username
from svcs.errors import UNSUPPORTED_OPERATION


def run_config(arguments: list[str]) -> None:
    """Entry point for ``svcs config``; *arguments* are the positional args."""
    repo = require_repository()

    if not arguments:
        username = get_username(repo)
        if username:
            typer.echo(f"The username is {username}.")
        else:
            typer.echo("Please, tell me who you are.")
    elif len(arguments) == 1:
        set_username(repo, arguments[0])
        typer.echo(f"The username is {arguments[0]}.")
    else:
        typer.echo(UNSUPPORTED_OPERATION)
