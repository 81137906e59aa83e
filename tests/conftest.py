from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

import pytest

from gitmanager.config import GitConfig
from gitmanager.git.manager import GitManager
from gitmanager.logger import LOGGER_NAME


class FakeRunner:
    """Process runner that returns canned results keyed by argument vector."""

    def __init__(self) -> None:
        self.responses: dict[tuple[str, ...], subprocess.CompletedProcess[str] | Exception] = {}
        self.calls: list[list[str]] = []

    def add(
        self,
        cmd: Sequence[str],
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> None:
        self.responses[tuple(cmd)] = subprocess.CompletedProcess(
            list(cmd), returncode, stdout, stderr
        )

    def fail_with(self, cmd: Sequence[str], error: Exception) -> None:
        self.responses[tuple(cmd)] = error

    def run(self, cmd: Sequence[str]) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(cmd))
        response = self.responses.get(tuple(cmd))
        if response is None:
            raise AssertionError(f"Unexpected command: {list(cmd)}")
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def manager(fake_runner: FakeRunner) -> GitManager:
    return GitManager(runner=fake_runner, config=GitConfig())


def _git(repo_root: Path, *args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test User",
            "-c",
            "user.email=test@example.com",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=repo_root,
        check=True,
        capture_output=True,
        text=True,
    )


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A real repository on `main` with one commit."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    _git(repo_root, "init", "-b", "main")
    (repo_root / "README.md").write_text("# test repo\n", encoding="utf-8")
    _git(repo_root, "add", "-A")
    _git(repo_root, "commit", "-m", "init")
    return repo_root


@pytest.fixture
def git():
    """Run git with a fixed identity inside a test repository."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    return _git


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installs so they never outlive a CliRunner stream."""
    yield
    logging.getLogger(LOGGER_NAME).handlers.clear()
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)
