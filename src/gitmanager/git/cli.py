from typing import Annotated

import typer

from gitmanager.git.errors import ExecutionError
from gitmanager.git.manager import GitManager
from gitmanager.logger import logger

branch_typer = typer.Typer(help="Local branch helpers")
remote_typer = typer.Typer(help="Remote helpers")


def get_manager(ctx: typer.Context) -> GitManager:
    manager = ctx.obj
    if not isinstance(manager, GitManager):
        manager = GitManager()
        ctx.obj = manager
    return manager


def require_repository(ctx: typer.Context) -> GitManager:
    manager = get_manager(ctx)
    if not manager.is_repository():
        logger.error("Error: not inside a Git repository.")
        raise typer.Exit(2)
    return manager


def _current_branch_or_none(manager: GitManager) -> str | None:
    try:
        return manager.current_branch()
    except ExecutionError:
        return None


@branch_typer.command(help="Print the name of the checked-out branch.")
def current(ctx: typer.Context) -> None:
    manager = require_repository(ctx)
    try:
        typer.echo(manager.current_branch())
    except ExecutionError as err:
        logger.error(str(err))
        raise typer.Exit(1) from err


@branch_typer.command(name="list", help="List local branches.")
def list_branches(ctx: typer.Context) -> None:
    manager = require_repository(ctx)
    try:
        branches = manager.list_local_branches()
    except ExecutionError as err:
        logger.error(str(err))
        raise typer.Exit(1) from err

    active = _current_branch_or_none(manager)
    for branch_name in branches:
        marker = "*" if branch_name == active else " "
        typer.echo(f"{marker} {branch_name}")


@branch_typer.command(
    help="Delete local branches. Unmerged branches prompt for a forced delete."
)
def delete(
    ctx: typer.Context,
    branch_names: Annotated[
        list[str], typer.Argument(help="Branches to delete", show_default=False)
    ],
    force: Annotated[
        bool, typer.Option("-f", "--force", help="Delete even if not fully merged")
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("-y", "--yes", help="Force delete unmerged branches without asking"),
    ] = False,
) -> None:
    manager = require_repository(ctx)
    active = _current_branch_or_none(manager)

    failed: list[str] = []
    for branch_name in branch_names:
        if branch_name == active:
            logger.error(f"Refusing to delete the current branch '{branch_name}'.")
            failed.append(branch_name)
            continue

        result = manager.delete_local_branch(branch_name, force=force)
        if result.require_force and (
            yes
            or typer.confirm(
                f"Branch '{branch_name}' is not fully merged. Force delete it?"
            )
        ):
            result = manager.delete_local_branch(branch_name, force=True)

        if result.success:
            logger.info(result.message)
        else:
            logger.error(result.message)
            failed.append(branch_name)

    if failed:
        logger.error(f"Could not delete: {', '.join(failed)}")
        raise typer.Exit(1)


@remote_typer.command(name="list", help="List configured remotes.")
def list_remotes(ctx: typer.Context) -> None:
    manager = require_repository(ctx)
    try:
        remotes = manager.list_remotes()
    except ExecutionError as err:
        logger.error(str(err))
        raise typer.Exit(1) from err

    if not remotes:
        logger.info("No remotes configured.")
    for remote_name in remotes:
        typer.echo(remote_name)
