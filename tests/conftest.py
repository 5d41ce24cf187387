"""Test fixtures for common-utils."""

import logging
import os

import pytest

os.environ["LOG_FORMAT"] = "text"
os.environ.pop("APP_ENV", None)

from common_utils.logging import setup_logging


@pytest.fixture
def configure_logging():
    """Call ``setup_logging`` and detach its handler afterwards."""
    root = logging.getLogger()
    level = root.level
    added = []

    def _configure(*args, **kwargs):
        setup_logging(*args, **kwargs)
        added.extend(root.handlers)
        return root

    yield _configure
    for handler in added:
        root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def env_file(tmp_path):
    """Write a ``.env`` file and return its path."""

    def _write(content: str):
        path = tmp_path / ".env"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
