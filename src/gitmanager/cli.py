import logging
import shlex
from pathlib import Path
from typing import Annotated, Optional

import typer

from gitmanager.config import GitConfig, parse_timeout
from gitmanager.git.cli import branch_typer, get_manager, remote_typer, require_repository
from gitmanager.git.errors import ExecutionError
from gitmanager.git.manager import GitManager
from gitmanager.logger import logger, setup_logging

app = typer.Typer(help="Everyday git branch and remote housekeeping.")
app.add_typer(branch_typer, name="branch")
app.add_typer(branch_typer, name="br")  # Add alias for branch
app.add_typer(remote_typer, name="remote")


@app.callback()
def main(
    ctx: typer.Context,
    git: Annotated[
        Optional[str],
        typer.Option("--git", help="git executable to run. Defaults to $GIT_MANAGER_GIT or 'git'"),
    ] = None,
    timeout: Annotated[
        Optional[str],
        typer.Option(help="Seconds to wait for each git command. Defaults to $GIT_MANAGER_TIMEOUT"),
    ] = None,
    cwd: Annotated[
        Optional[Path],
        typer.Option(help="Repository directory. Defaults to the current directory"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("-v", "--verbose", help="Log every git command")
    ] = False,
):
    setup_logging(logging.DEBUG if verbose else logging.INFO)
    if isinstance(ctx.obj, GitManager):
        # Already configured, e.g. by an embedding application
        return
    try:
        config = GitConfig.from_env().with_overrides(
            binary=git, timeout=parse_timeout(timeout), cwd=cwd
        )
    except ValueError as err:
        logger.error(str(err))
        raise typer.Exit(2) from err
    ctx.obj = GitManager(config=config)


@app.command(help="Report whether the working directory is inside a git repository.")
def check(ctx: typer.Context):
    if get_manager(ctx).is_repository():
        logger.info("Inside a git repository.")
    else:
        logger.info("Not a git repository.")
        raise typer.Exit(1)


@app.command(
    name="exec",
    help="Run an arbitrary git command and print its raw output.",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def exec_command(
    ctx: typer.Context,
    args: Annotated[
        list[str], typer.Argument(help="Arguments passed to git", show_default=False)
    ],
):
    manager = require_repository(ctx)
    try:
        output = manager.execute_raw(shlex.join(args))
    except ExecutionError as err:
        logger.error(str(err))
        raise typer.Exit(1) from err
    typer.echo(output, nl=False)


if __name__ == "__main__":
    app()
