import os
from dataclasses import dataclass, replace
from pathlib import Path

GIT_BINARY_ENV_VAR = "GIT_MANAGER_GIT"
TIMEOUT_ENV_VAR = "GIT_MANAGER_TIMEOUT"

DEFAULT_GIT_BINARY = "git"


def parse_timeout(raw: str | None) -> float | None:
    """Parse a timeout in seconds. Empty or missing values mean no timeout."""
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError as err:
        raise ValueError(f"Invalid timeout {raw!r}: expected a number of seconds.") from err
    if timeout <= 0:
        raise ValueError(f"Invalid timeout {raw!r}: must be greater than zero.")
    return timeout


@dataclass(frozen=True)
class GitConfig:
    binary: str = DEFAULT_GIT_BINARY
    timeout: float | None = None
    cwd: Path | None = None

    @classmethod
    def from_env(cls) -> "GitConfig":
        binary = os.getenv(GIT_BINARY_ENV_VAR) or DEFAULT_GIT_BINARY
        return cls(binary=binary, timeout=parse_timeout(os.getenv(TIMEOUT_ENV_VAR)))

    def with_overrides(
        self,
        *,
        binary: str | None = None,
        timeout: float | None = None,
        cwd: Path | None = None,
    ) -> "GitConfig":
        """Return a copy with every non-None argument applied."""
        changes: dict[str, object] = {}
        if binary is not None:
            changes["binary"] = binary
        if timeout is not None:
            changes["timeout"] = timeout
        if cwd is not None:
            changes["cwd"] = cwd
        return replace(self, **changes)
