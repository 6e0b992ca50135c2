# itsa:header:start
#
#   project      : itsa
#   file         : period.py
#   file_relpath : src/itsa/cli/commands/period.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""itsa `period` command.

Renders one obligation period the way the obligations listing does: the row
is colored by where "now" falls relative to the period and its due date, and
ends with a ``t``/``f`` marker telling whether the obligation was met.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from itsa.cli.console_helpers import get_console_safely
from itsa.cli.errors import ItsaUsageError
from itsa.cli.options import DATE
from itsa.periods import format_period_row, now

if TYPE_CHECKING:
    from datetime import date


@click.command(
    name="period",
    help="Show the status of the obligation period START..END due on DUE.",
)
@click.argument("start", type=DATE)
@click.argument("end", type=DATE)
@click.argument("due", type=DATE)
@click.option(
    "--received",
    type=DATE,
    default=None,
    help="Date the submission for this period was received.",
)
def period_command(*, start: date, end: date, due: date, received: date | None) -> None:
    """Render one obligations row.

    Raises:
        ItsaUsageError: If END is before START or ITSA_SET_DATE is invalid.
    """
    if end < start:
        raise ItsaUsageError(f"Period end {end} is before its start {start}.")
    try:
        current = now()
    except ValueError as exc:
        raise ItsaUsageError(f"Invalid ITSA_SET_DATE: {exc}") from exc

    console = get_console_safely()
    console.printc("#CHARC#  %-25s %-12s %-12s %-12s %s#RST#\n", "period_id", "start", "end", "due", "met")
    console.printc("#CHARC# %s#RST#\n", "-" * 70)
    console.printc(format_period_row(start, end, due, received, current))
