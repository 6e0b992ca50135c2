# itsa:header:start
#
#   project      : itsa
#   file         : version.py
#   file_relpath : src/itsa/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""itsa `version` command.

Prints the current itsa version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from itsa.cli.console_helpers import get_console_safely
from itsa.constants import ITSA_VERSION, PROD_NAME


@click.command(
    name="version",
    help="Show the current version of itsa.",
)
def version_command() -> None:
    """Show the current version of itsa."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console = get_console_safely()

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.printc("#BOLD#%s version:#RST# %s\n", PROD_NAME, ITSA_VERSION)
    else:
        console.printc("%s\n", ITSA_VERSION)
