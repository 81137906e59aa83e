from __future__ import annotations

from pathlib import Path

import pytest

from gitmanager.config import GitConfig, parse_timeout


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("GIT_MANAGER_GIT", raising=False)
    monkeypatch.delenv("GIT_MANAGER_TIMEOUT", raising=False)
    assert GitConfig.from_env() == GitConfig(binary="git", timeout=None, cwd=None)


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("GIT_MANAGER_GIT", "/usr/local/bin/git")
    monkeypatch.setenv("GIT_MANAGER_TIMEOUT", "30")
    assert GitConfig.from_env() == GitConfig(binary="/usr/local/bin/git", timeout=30.0)


def test_empty_binary_falls_back_to_git(monkeypatch) -> None:
    monkeypatch.setenv("GIT_MANAGER_GIT", "")
    monkeypatch.delenv("GIT_MANAGER_TIMEOUT", raising=False)
    assert GitConfig.from_env().binary == "git"


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_blank_timeout_means_none(raw) -> None:
    assert parse_timeout(raw) is None


@pytest.mark.parametrize("raw", ["soon", "0", "-5"])
def test_invalid_timeout_raises(raw) -> None:
    with pytest.raises(ValueError, match="Invalid timeout"):
        parse_timeout(raw)


def test_with_overrides_only_applies_given_values(tmp_path: Path) -> None:
    base = GitConfig(binary="git", timeout=10.0)
    assert base.with_overrides() == base
    assert base.with_overrides(cwd=tmp_path) == GitConfig(binary="git", timeout=10.0, cwd=tmp_path)
    assert base.with_overrides(binary="hub", timeout=1.5).binary == "hub"
