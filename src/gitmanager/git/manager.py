"""
Façade over the git executable.

`GitManager` builds argument vectors for a handful of branch and remote
operations and hands them to a `ProcessRunner`. Every failure surfaces as
`ExecutionError` with two exceptions: `is_repository` treats any failure as
"no", and `delete_local_branch` reports failure through a `DeleteResult` so the
caller can decide whether to retry with force.

The module-level functions at the bottom run against a manager configured from
the environment (see `GitConfig.from_env`).
"""

import shlex

from gitmanager.config import GitConfig
from gitmanager.git.branches import (
    DeleteResult,
    delete_flag,
    parse_branch_list,
    requires_force,
)
from gitmanager.git.errors import ExecutionError
from gitmanager.git.exec import (
    ProcessRunner,
    SubprocessRunner,
    capture,
    failure_detail,
)
from gitmanager.git.remotes import parse_remote_list
from gitmanager.logger import logger


class GitManager:
    def __init__(
        self,
        runner: ProcessRunner | None = None,
        config: GitConfig | None = None,
    ) -> None:
        self.config = config or GitConfig()
        self.runner = runner or SubprocessRunner(self.config)

    def _git(self, *args: str) -> list[str]:
        return [self.config.binary, *args]

    def is_repository(self) -> bool:
        cmd = self._git("rev-parse", "--is-inside-work-tree")
        try:
            result = self.runner.run(cmd)
        except ExecutionError as err:
            # Still a negative answer, but a missing git should not look like
            # an ordinary non-repository in the logs.
            logger.warning(f"Unable to probe for a git repository: {err}")
            return False
        return result.returncode == 0

    def current_branch(self) -> str:
        cmd = self._git("branch", "--show-current")
        branch = capture(self.runner, cmd).strip()
        if not branch:
            raise ExecutionError(cmd, "HEAD is detached")
        return branch

    def list_local_branches(self) -> list[str]:
        return parse_branch_list(capture(self.runner, self._git("branch")))

    def delete_local_branch(self, branch_name: str, force: bool = False) -> DeleteResult:
        cmd = self._git("branch", delete_flag(force), branch_name)
        try:
            result = self.runner.run(cmd)
        except ExecutionError as err:
            return DeleteResult(
                success=False,
                message=f"Failed to delete branch {branch_name}: {err}",
            )

        if result.returncode == 0:
            logger.debug(f"Deleted branch {branch_name}")
            return DeleteResult(
                success=True,
                message=f"Branch {branch_name} deleted successfully",
            )

        detail = failure_detail(result)
        return DeleteResult(
            success=False,
            message=f"Failed to delete branch {branch_name}: {detail}",
            require_force=not force and requires_force(detail),
        )

    def list_remotes(self) -> list[str]:
        return parse_remote_list(capture(self.runner, self._git("remote")))

    def execute_raw(self, command_suffix: str) -> str:
        """
        Run `git <command_suffix>` and return its stdout untouched.

        The suffix is split with shell quoting rules but is otherwise passed
        through as given. Callers are trusted. Failures report the command
        exactly as the caller wrote it.
        """
        attempted = f"{self.config.binary} {command_suffix}"
        try:
            args = shlex.split(command_suffix)
        except ValueError as err:
            raise ExecutionError(attempted, str(err)) from err
        try:
            return capture(self.runner, self._git(*args))
        except ExecutionError as err:
            raise ExecutionError(attempted, err.detail, err.returncode) from err


def default_manager() -> GitManager:
    return GitManager(config=GitConfig.from_env())


def is_repository() -> bool:
    return default_manager().is_repository()


def current_branch() -> str:
    return default_manager().current_branch()


def list_local_branches() -> list[str]:
    return default_manager().list_local_branches()


def delete_local_branch(branch_name: str, force: bool = False) -> DeleteResult:
    return default_manager().delete_local_branch(branch_name, force=force)


def list_remotes() -> list[str]:
    return default_manager().list_remotes()


def execute_raw(command_suffix: str) -> str:
    return default_manager().execute_raw(command_suffix)
