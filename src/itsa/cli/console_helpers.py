# itsa:header:start
#
#   project      : itsa
#   file         : console_helpers.py
#   file_relpath : src/itsa/cli/console_helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Utilities for obtaining the program-output console.

`get_console_safely` returns the console stored on the active Click context
and, when no context is active (e.g. a command body called directly from a
test), a console built from the environment's color settings.
"""

from __future__ import annotations

import click

from itsa.rendering.color_mode import resolve_color_mode
from itsa.rendering.output import MarkupConsole


def get_console_safely() -> MarkupConsole:
    """Return a MarkupConsole using the active Click context when available.

    If an active Click context exists and a console instance is stored in
    ``ctx.obj["console"]``, that console is returned. Otherwise a fresh
    console is created from ``ITSA_COLOR`` and the TTY status of stdout.
    """
    ctx = click.get_current_context(silent=True)
    if ctx is not None and isinstance(getattr(ctx, "obj", None), dict) and "console" in ctx.obj:
        console: MarkupConsole = ctx.obj["console"]
        return console
    return MarkupConsole(resolve_color_mode())
