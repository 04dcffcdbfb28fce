import logging
from pathlib import Path
from typing import Dict, Iterator

import pytest

from gha_core.config import CHANNELS, SUMMARY_VARIABLE, RunnerFiles, channel_variable
from gha_core.log import BASE_LOGGER

RUNNER_VARIABLES = [channel_variable(name) for name in CHANNELS] + [
    SUMMARY_VARIABLE,
    "RUNNER_DEBUG",
    "GITHUB_EVENT_PATH",
    "GITHUB_REPOSITORY",
]


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the real runner environment (when tests run inside Actions) out of the way."""
    for name in RUNNER_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def channel_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Dict[str, Path]:
    """Create empty channel files and point the GITHUB_* variables at them."""
    files = {}
    for name in CHANNELS:
        path = tmp_path / f"github_{name.lower()}"
        path.touch()
        monkeypatch.setenv(channel_variable(name), str(path))
        files[name] = path
    return files


@pytest.fixture
def summary_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "step_summary"
    path.touch()
    monkeypatch.setenv(SUMMARY_VARIABLE, str(path))
    return path


@pytest.fixture
def runner_files(channel_files: Dict[str, Path], summary_file: Path) -> RunnerFiles:
    return RunnerFiles.from_env()


@pytest.fixture(autouse=True)
def base_logger() -> Iterator[logging.Logger]:
    """Give each test a bare ``gha_core`` logger and restore it afterwards."""
    base = logging.getLogger(BASE_LOGGER)
    saved = (list(base.handlers), base.level, base.propagate)
    base.handlers.clear()
    yield base
    base.handlers[:] = saved[0]
    base.setLevel(saved[1])
    base.propagate = saved[2]
