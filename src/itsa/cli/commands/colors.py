# itsa:header:start
#
#   project      : itsa
#   file         : colors.py
#   file_relpath : src/itsa/cli/commands/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""itsa `colors` command.

Lists the markup color names, each rendered in its own color. With ``-v`` the
raw escape sequence is shown as well.
"""

from __future__ import annotations

import click

from itsa.cli.console_helpers import get_console_safely
from itsa.rendering.colors import COLOR_TABLE


@click.command(
    name="colors",
    help="List the color names usable as #NAME# markup.",
)
def colors_command() -> None:
    """List the markup color names."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console = get_console_safely()
    verbose = ctx.obj.get("verbosity_level", 0) > 0

    console.printc("#CHARC#  %-12s %s#RST#\n", "name", "sample" if not verbose else "sample / code")
    console.printc("#CHARC# %s#RST#\n", "-" * 40)
    for name, code in COLOR_TABLE.items():
        # Build the sample markup from the name so it goes through the expander.
        sample = f"#{name}#{name.lower()}#RST#"
        if verbose:
            console.printc("  %-12s " + sample + "  %r\n", name, code)
        else:
            console.printc("  %-12s " + sample + "\n", name)
