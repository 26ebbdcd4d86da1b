"""Shared fixtures for the emojiscript test suite."""

import logging

import pytest

from emojiscript.config import Settings
from emojiscript.service import TranspileCache, TranspileService


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers attached by the CLI so they never outlive a captured stream."""
    yield
    package_logger = logging.getLogger("emojiscript")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TranspileCache(max_size=10, ttl=60.0, clock=clock)


@pytest.fixture
def service(cache):
    return TranspileService(cache)


@pytest.fixture
def settings():
    return Settings(rate_limit_requests=100, rate_limit_window_seconds=60.0)
