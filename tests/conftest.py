"""Shared fixtures for the adoption engine tests."""

import logging

import pytest

from abrigo import config


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep ABRIGO_* variables and root log handlers from leaking between tests."""
    for name in (config.ENV_CATALOG, config.ENV_LOG_LEVEL, config.ENV_LOG_JSON):
        monkeypatch.delenv(name, raising=False)

    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
