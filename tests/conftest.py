"""Test setup for summary-generate."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (run the CLI in a subprocess)",
    )


TreeFactory = Callable[[dict], Path]


def _write_tree(base: Path, layout: dict) -> None:
    for name, value in layout.items():
        target = base / name
        if isinstance(value, dict):
            target.mkdir(parents=True, exist_ok=True)
            _write_tree(target, value)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(value, encoding="utf-8")


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Create a directory tree from a nested dict; strings are file contents."""

    def factory(layout: dict) -> Path:
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        _write_tree(root, layout)
        return root

    return factory


@pytest.fixture
def grouped_tree(make_tree: TreeFactory) -> Path:
    """Two category groups, one of them containing a directory chapter."""
    return make_tree(
        {
            "guide_advanced": {"README.md": "# Advanced\n"},
            "guide_intro.md": "# Intro\n",
            "guide_setup.md": "# Setup\n",
            "ref_api.md": "# API\n",
        }
    )


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI attaches, since they point at captured streams."""
    yield
    logger = logging.getLogger("summary_generate")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
