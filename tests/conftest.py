"""Shared pytest configuration and fixtures for all tests."""

import json
import logging
from pathlib import Path

import pytest

import postmore.utils.logger as logger_module


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "excerpt: excerpt filter and commands")
    config.addinivalue_line("markers", "config: configuration loading")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def _reset_logging() -> None:
    logger = logging.getLogger("postmore")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger_module._CONFIGURED = False


@pytest.fixture(autouse=True)
def postmore_home(tmp_path: Path, monkeypatch) -> Path:
    """Point POSTMORE_HOME at a per-test directory and reset logging afterwards."""
    home = tmp_path / "postmore_home"
    monkeypatch.setenv("POSTMORE_HOME", str(home))
    yield home
    _reset_logging()


@pytest.fixture
def write_config(postmore_home: Path):
    """Write a config.json into the test home directory."""

    def _write(data) -> Path:
        postmore_home.mkdir(parents=True, exist_ok=True)
        path = postmore_home / "config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return path

    return _write


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
