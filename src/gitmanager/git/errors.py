import shlex
from typing import Sequence


def format_command(cmd: Sequence[str]) -> str:
    return shlex.join(cmd)


class ExecutionError(RuntimeError):
    """A git invocation failed to start or exited with a non-zero status."""

    def __init__(
        self,
        command: Sequence[str] | str,
        detail: str,
        returncode: int | None = None,
    ) -> None:
        self.command = command if isinstance(command, str) else format_command(command)
        self.detail = detail.strip()
        self.returncode = returncode
        super().__init__(f"Failed to execute '{self.command}': {self.detail}")
