from __future__ import annotations

from unittest.mock import Mock

import pytest

import log_method
from log_method.settings import get_settings


@pytest.fixture(autouse=True)
def reset_log_method():
    """
    Test hygiene: every test starts from default settings and a default config.

    Settings are cached per process, so env changes made with monkeypatch only
    take effect after the cache is cleared.
    """
    get_settings.cache_clear()
    log_method.reset()
    yield
    get_settings.cache_clear()
    log_method.reset()


@pytest.fixture
def sink(reset_log_method):
    s = Mock(name="sink")
    log_method.configure(sink=s)
    return s


@pytest.fixture
def recorder(reset_log_method):
    r = Mock(name="breadcrumb_recorder")
    log_method.configure(breadcrumb_recorder=r)
    return r
