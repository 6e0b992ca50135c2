# itsa:header:start
#
#   project      : itsa
#   file         : errors.py
#   file_relpath : src/itsa/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Exceptions for the itsa CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions print through the project console when one is available (see
    `show()`), as an ``[ERROR]`` message on stderr. The root group
    ([`itsa.cli.main.ItsaGroup`][]) calls `show()` while the Click context is
    still active so the console can be found. Without a console they fall
    back to Click's default display.
"""

from __future__ import annotations

from typing import IO, Any

import click

from itsa.cli.exit_codes import ExitCode
from itsa.rendering.output import MarkupConsole


class ItsaError(click.ClickException):
    """Base class for all itsa CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        The message is passed as a substitution argument so that a ``%`` it
        contains is printed literally.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if isinstance(console, MarkupConsole):
            console.error("%s\n", self.format_message())
            return
        super().show(file)


class ItsaUsageError(ItsaError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ItsaConfigError(ItsaError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
