# itsa:header:start
#
#   file         : options.py
#   file_relpath : src/itsa/cli/options.py
#   project      : itsa
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Common CLI option utilities for the Click-based itsa CLI.

This module centralizes reusable options (verbosity, color) and their
resolution logic, so commands and groups can stay thin. The helpers here are
Click-aware.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import ParamSpec, TypeVar

import click

from itsa.cli.errors import ItsaUsageError
from itsa.config.logging import get_logger
from itsa.periods import parse_date
from itsa.rendering.color_mode import ColorMode

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        Positive for more detail, negative for less, 0 by default.

    Raises:
        ItsaUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ItsaUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output: -q hides normal output, -qq also hides warnings.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.

    Behavior:
        Adds --color with choices (auto, on, off); when given it takes
        precedence over ITSA_COLOR. Adds --no-color, which wins over --color.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), on, or off. Overrides ITSA_COLOR.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=off).",
    )(f)
    return f


def effective_color_override(color_mode: str | None, no_color: bool) -> ColorMode | None:
    """Combine ``--color`` and ``--no-color`` into a single override (or None)."""
    if no_color:
        return ColorMode.OFF
    if color_mode is None:
        return None
    return ColorMode(color_mode)


class DateParam(click.ParamType):
    """Click parameter type for ISO ``YYYY-MM-DD`` dates."""

    name = "date"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> date:
        """Convert `value` into a `datetime.date`."""
        if isinstance(value, date):
            return value
        try:
            return parse_date(str(value))
        except ValueError:
            self.fail(f"{value!r} is not a valid YYYY-MM-DD date.", param, ctx)


DATE = DateParam()
