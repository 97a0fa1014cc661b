# orgintel-roi/tests/conftest.py
#
# Test bootstrap for pytest: ensure repository root is on sys.path so tests can import
# the `orgintel_roi` package without requiring an editable install.
#
# Fixture Organization:
# - This file: Core fixtures (repo_root, config, temporary directories)
# - tests/unit/engine/conftest.py: Engine input records and reference scenarios
#
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger


def _find_repo_root(start: Path | None = None) -> Path:
    """
    Walk upwards from `start` (defaults to this file's parent) until a likely
    repository root is found. Heuristics:
      - presence of pyproject.toml
      - presence of the `orgintel_roi` package directory
      - presence of a .git directory

    Falls back to one level up from this file if nothing is found.
    """
    if start is None:
        start = Path(__file__).resolve().parent

    current = start
    root_marker_names = ("pyproject.toml", "orgintel_roi", ".git")
    visited = set()
    while True:
        if str(current) in visited:
            break
        visited.add(str(current))
        for marker in root_marker_names:
            if (current / marker).exists():
                return current
        if current.parent == current:
            break
        current = current.parent

    return Path(__file__).resolve().parents[1]


_repo_root = _find_repo_root()
_repo_root_str = str(_repo_root)

if _repo_root_str not in sys.path:
    sys.path.insert(0, _repo_root_str)

# Configure test logging using loguru for consistency with application code
logger.remove()  # Remove default handler
logger.add(
    sys.stderr,
    level="INFO",
    format="{time:YYYY-MM-DD HH:mm:ss} {level} {name}: {message}",
)

logger.debug("Added repository root to sys.path: {}", _repo_root_str)


# Pytest Configuration
# ===================


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "fast: Fast unit tests that should complete in < 1 second",
    )
    config.addinivalue_line(
        "markers",
        "unit: Pure unit tests with no I/O",
    )
    config.addinivalue_line(
        "markers",
        "roi: Tests of the ROI calculation engine",
    )
    config.addinivalue_line(
        "markers",
        "regression: Regression tests pinning published model outputs",
    )


@pytest.fixture(scope="session")
def repo_root() -> Path:
    """
    Return the repository root Path for tests that need to read files relative to the project.
    """
    return _repo_root


# Configuration Fixtures
# ======================


@pytest.fixture(scope="session")
def config_dir(repo_root: Path) -> Path:
    return repo_root / "config"


@pytest.fixture
def test_config(config_dir: Path):
    """Load the development configuration from the repository's config directory."""
    from orgintel_roi.config.loader import get_config, reload_config

    reload_config()
    yield get_config(environment="development", config_dir=config_dir)
    reload_config()
