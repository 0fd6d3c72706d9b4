"""SVCS — Typer application root.

Entry point for the ``svcs`` console script.  Registers the five
subcommands (config, add, log, commit, checkout).

Every subcommand is a plain ``@cli.command()`` that takes a variadic
``ARGS`` list rather than typed parameters.  The command implementations
decide what a missing or extra argument means ("Message was not passed.",
"Unsupported operation!"), so Click must not reject the call first.
"""
from __future__ import annotations

import logging
from typing import Optional

import typer

from svcs.commands.add import run_add
from svcs.commands.checkout import run_checkout
from svcs.commands.commit import run_commit
from svcs.commands.config import run_config
from svcs.commands.log import run_log
from svcs.settings import get_settings

# Positional tokens such as "-fix typo" are data for the command, not options.
_POSITIONAL_ONLY = {"ignore_unknown_options": True}

cli = typer.Typer(
    name="svcs",
    help="These are SVCS commands:",
    no_args_is_help=True,
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    try:
        debug = verbose or get_settings().debug
    except ValueError:
        # Invalid SVCS_* settings are reported when the repository is opened.
        debug = verbose
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.callback()
def _main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log every file read, staged and restored."
    ),
) -> None:
    _configure_logging(verbose)


@cli.command("config", help="Get and set a username.", context_settings=_POSITIONAL_ONLY)
def _config_cmd(
    args: Optional[list[str]] = typer.Argument(None, help="New username."),
) -> None:
    run_config(list(args or []))


@cli.command("add", help="Add a file to the index.", context_settings=_POSITIONAL_ONLY)
def _add_cmd(
    args: Optional[list[str]] = typer.Argument(None, help="Path of the file to track."),
) -> None:
    run_add(list(args or []))


@cli.command("log", help="Show commit logs.")
def _log_cmd() -> None:
    run_log()


@cli.command("commit", help="Save changes.", context_settings=_POSITIONAL_ONLY)
def _commit_cmd(
    args: Optional[list[str]] = typer.Argument(None, help="Commit message (quote multiple words)."),
) -> None:
    run_commit(list(args or []))


@cli.command("checkout", help="Restore a file.", context_settings=_POSITIONAL_ONLY)
def _checkout_cmd(
    args: Optional[list[str]] = typer.Argument(None, help="Commit fingerprint to restore."),
) -> None:
    run_checkout(list(args or []))


if __name__ == "__main__":
    cli()
