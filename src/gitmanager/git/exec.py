import subprocess
from typing import Protocol, Sequence, TypeAlias

from gitmanager.config import GitConfig
from gitmanager.git.errors import ExecutionError, format_command
from gitmanager.logger import logger

ProcessResult: TypeAlias = subprocess.CompletedProcess[str]


class ProcessRunner(Protocol):
    def run(self, cmd: Sequence[str]) -> ProcessResult: ...


class SubprocessRunner:
    """
    Run commands as child processes and capture their output.

    Centralizes subprocess policy so the façade never calls subprocess directly.
    Non-zero exits are returned to the caller; only a process that cannot be
    started or that exceeds the configured timeout raises.
    """

    def __init__(self, config: GitConfig | None = None) -> None:
        self.config = config or GitConfig()

    def run(self, cmd: Sequence[str]) -> ProcessResult:
        cwd = self.config.cwd
        logger.debug(f"Running: {format_command(cmd)}")
        try:
            return subprocess.run(
                list(cmd),
                cwd=str(cwd) if cwd else None,
                check=False,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.config.timeout,
            )
        except OSError as err:
            # A missing cwd also raises FileNotFoundError, with cwd as filename
            if isinstance(err, FileNotFoundError) and err.filename == cmd[0]:
                detail = f"executable not found: {cmd[0]}"
            else:
                detail = str(err)
            raise ExecutionError(cmd, detail) from err
        except subprocess.TimeoutExpired as err:
            raise ExecutionError(
                cmd, f"timed out after {self.config.timeout} seconds"
            ) from err


def failure_detail(result: ProcessResult) -> str:
    """Return the most useful text describing a failed run."""
    for stream in (result.stderr, result.stdout):
        if stream and stream.strip():
            return stream.strip()
    return f"exited with status {result.returncode}"


def capture(runner: ProcessRunner, cmd: Sequence[str]) -> str:
    """Run a command and return its raw stdout, raising on a non-zero exit."""
    result = runner.run(cmd)
    if result.returncode != 0:
        raise ExecutionError(cmd, failure_detail(result), result.returncode)
    return result.stdout or ""
