"""Pytest configuration and fixtures for story-sort tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture
def wildcard_order() -> dict:
    """Order tree using single-level wildcards under two groups."""
    return {
        "articles": {},
        "elements": {
            "*": {"default": None},
        },
        "components": {
            "*": {"default": None},
        },
    }


@pytest.fixture
def catch_all_order() -> dict:
    """Order tree with a root-level catch-all and a deep explicit branch."""
    return {
        "**": {"default": None},
        "articles": None,
        "elements": None,
        "components": {
            "navigation": {
                "header": {
                    "default": None,
                    "with search": None,
                }
            }
        },
    }


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Write text to a YAML file in tmp_path and return its path.

    Usage:
        def test_something(write_yaml):
            path = write_yaml("story-sort.yaml", "order: null\\n")
    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Restore root logger handlers after CLI tests reconfigure logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
