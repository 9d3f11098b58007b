"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

from godir.utils.logger import reset_logging

DOMAIN_MARKERS = {
    "config": "Config store and config commands",
    "match": "Pattern matching against known directories",
    "scan": "Recursive filesystem scanning",
    "resolve": "Interactive resolution flow",
    "platform": "Platform policy",
    "cli": "Typer command-line interface",
}


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")
    for name, description in DOMAIN_MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def make_tree(root: Path, *relative_dirs: str) -> Path:
    """Create ``relative_dirs`` under ``root`` and return ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for rel in relative_dirs:
        (root / rel).mkdir(parents=True, exist_ok=True)
    return root


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def godir_home(tmp_path_factory, monkeypatch) -> Path:
    """Point GODIR_HOME at a fresh directory so no test touches ~/.godir.

    Lives outside ``tmp_path`` so scans of ``tmp_path`` never see it.
    """
    home = tmp_path_factory.mktemp("godir_home")
    monkeypatch.setenv("GODIR_HOME", str(home))
    reset_logging()
    yield home
    reset_logging()


@pytest.fixture
def config_path(godir_home: Path) -> Path:
    """Path of the directory list inside the isolated home."""
    return godir_home / "directories.json"
