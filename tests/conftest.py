# itsa:header:start
#
#   project      : itsa
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Pytest configuration for the itsa test suite.

Sets up verbose logging for test runs and isolates every test from the
developer's shell: the ``ITSA_*`` variables that change coloring, logging or
the current date are removed before each test.
"""

from __future__ import annotations

import pytest

from itsa.config import logging
from itsa.constants import COLOR_ENV_VAR, LOG_LEVEL_ENV_VAR, SET_DATE_ENV_VAR
from itsa.rendering.color_mode import ColorSettings


@pytest.fixture(autouse=True)
def isolate_itsa_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the environment never forces color, a log level or a date during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for var in (COLOR_ENV_VAR, LOG_LEVEL_ENV_VAR, SET_DATE_ENV_VAR):
        monkeypatch.delenv(var, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def color_on() -> ColorSettings:
    """Settings that always emit escape codes."""
    return ColorSettings.on()


@pytest.fixture
def color_off() -> ColorSettings:
    """Settings that never emit escape codes."""
    return ColorSettings.off()
