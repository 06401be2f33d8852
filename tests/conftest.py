"""Shared fixtures: isolate settings, config loader and logging per test."""
import logging

import pytest

import config_loader
from config_loader import ManagerConfig, MutationConfig, ParsingConfig
from logging_setup import configure_structlog
from settings import get_settings


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    monkeypatch.delenv("URLMANAGER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("URLMANAGER_CONFIG_PATH", raising=False)
    get_settings.cache_clear()
    config_loader._loader = None
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    get_settings.cache_clear()
    config_loader._loader = None
    # The CLI may attach a stderr handler bound to the runner's stream
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler and handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    configure_structlog()


@pytest.fixture
def natural():
    """Config that keeps query pairs in left-to-right order."""
    return ManagerConfig(parsing=ParsingConfig(order="natural"))


@pytest.fixture
def strict():
    return ManagerConfig(parsing=ParsingConfig(malformed_pairs="strict"))


@pytest.fixture
def atomic():
    return ManagerConfig(mutation=MutationConfig(atomic_add=True))
