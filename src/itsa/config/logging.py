# itsa:header:start
#
#   project      : itsa
#   file         : logging.py
#   file_relpath : src/itsa/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Custom itsa logging with TRACE logging.

This module extends the standard logging module with itsa-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.

Internal logging is kept separate from program output: user-facing text goes
through [`itsa.rendering.output.MarkupConsole`][], diagnostics go through here.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from itsa.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class ItsaLogger(logging.Logger):
    """Custom logger class for itsa with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(ItsaLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Single-letter shorthands accepted by earlier releases (ITSA_LOG_LEVEL=d / i)
_SHORTHAND_TO_LEVEL: Final[dict[str, int]] = {
    "D": logging.DEBUG,
    "I": logging.INFO,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def parse_log_level(value: str | None) -> int | None:
    """Translate a textual log level into a `logging` level.

    Accepts level names (``"TRACE"``, ``"debug"``, ...), numeric levels
    (``"10"``) and the single-letter shorthands ``d`` / ``i``.

    Args:
        value (str | None): Raw value, typically from the environment.

    Returns:
        int | None: The resolved level, or None when unset or unrecognized.
    """
    if not value:
        return None
    v = value.strip().upper()
    if not v:
        return None
    if v.isdigit():
        return int(v)
    if v in _NAME_TO_LEVEL:
        return _NAME_TO_LEVEL[v]
    return _SHORTHAND_TO_LEVEL.get(v[0])


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors ITSA_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10", or "d").
    """
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][itsa.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified, which keeps diagnostics out of the
    user's way.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Diagnostics go to stderr so they never interleave with program output on stdout
    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> ItsaLogger:
    """Retrieve an ItsaLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        ItsaLogger: An ItsaLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("ItsaLogger", logger)
