"""
Shared fixtures for alailog tests.

The shared logger cannot be reset through the public API, so these fixtures
put the provider back into its uninitialized state around every test and run
each test from its own temporary directory, where the default logs.txt lands.
"""

import io
from datetime import datetime

import pytest

import alailog.logger as logger_module
from alailog.config.models.parameter import LoggerConfig
from alailog.logger import Logger
from alailog.provider import LoggerProvider

FIXED_NOW = datetime(2024, 5, 6, 7, 8, 9)


class FixedDatetime(datetime):
    @classmethod
    def now(cls, tz=None):
        return FIXED_NOW


@pytest.fixture(autouse=True)
def isolated_provider(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(LoggerProvider, "_instance", None)
    yield
    instance = LoggerProvider._instance
    if instance is not None and instance.file is not None:
        instance.file.close()


@pytest.fixture
def fixed_clock(monkeypatch):
    monkeypatch.setattr(logger_module, "datetime", FixedDatetime)
    return FIXED_NOW


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_logger(sink):
    """Logger writing only to the in-memory `sink` unless told otherwise"""

    def _make(**overrides) -> Logger:
        settings = {
            "file": sink,
            "level": "all",
            "stdout": False,
            "stderr": False,
            "color": False,
            "timestamps": False,
        }
        settings.update(overrides)
        return Logger(LoggerConfig(**settings))

    return _make
