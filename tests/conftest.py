"""Shared fixtures for comodoro tests."""

import json
import shlex
from pathlib import Path

import pytest


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point COMODORO_CONFIG at a temporary file (not created)."""
    path = tmp_path / "comodoro" / "config.json"
    monkeypatch.setenv("COMODORO_CONFIG", str(path))
    return path


@pytest.fixture
def write_config(config_path: Path):
    """Write a configuration dict to the temporary config file."""

    def _write(data: dict) -> Path:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data))
        return config_path

    return _write


@pytest.fixture
def hook_log(tmp_path: Path) -> Path:
    """File hook commands append to, one line per run."""
    return tmp_path / "hooks.log"


@pytest.fixture
def append(hook_log: Path):
    """Build a shell command appending a word to the hook log."""

    def _append(word: str) -> str:
        return f"echo {word} >> {shlex.quote(str(hook_log))}"

    return _append


def read_log(path: Path) -> list[str]:
    if not path.exists():
        return []
    return path.read_text().split()
