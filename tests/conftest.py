import logging

import pytest

from core.config_loader import TRADIER_ACCESS_TOKEN_ENV
from utils.logging_setup import HTTP_CLIENT_LOGGER_NAMES


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Unset the token and run from an empty directory so no stray .env is merged"""
    # setenv first so teardown also removes a value merged from a .env file
    monkeypatch.setenv(TRADIER_ACCESS_TOKEN_ENV, "")
    monkeypatch.delenv(TRADIER_ACCESS_TOKEN_ENV)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    handler_filters = {handler: handler.filters[:] for handler in handlers}
    filters = root.filters[:]
    http_filters = {name: logging.getLogger(name).filters[:] for name in HTTP_CLIENT_LOGGER_NAMES}
    yield root
    root.setLevel(level)
    root.handlers[:] = handlers
    for handler, saved in handler_filters.items():
        handler.filters[:] = saved
    root.filters[:] = filters
    for name, saved in http_filters.items():
        logging.getLogger(name).filters[:] = saved
