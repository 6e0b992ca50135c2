# itsa:header:start
#
#   project      : itsa
#   file         : tax_year.py
#   file_relpath : src/itsa/cli/commands/tax_year.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""itsa `tax-year` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from itsa.cli.console_helpers import get_console_safely
from itsa.cli.errors import ItsaUsageError
from itsa.cli.options import DATE
from itsa.periods import tax_year, today

if TYPE_CHECKING:
    from datetime import date


@click.command(
    name="tax-year",
    help="Print the UK tax year (YYYY-YY) containing DATE (default: today).",
)
@click.argument("day", metavar="[DATE]", type=DATE, required=False)
def tax_year_command(*, day: date | None) -> None:
    """Print the tax year containing `day`.

    Raises:
        ItsaUsageError: If ITSA_SET_DATE holds an invalid date.
    """
    console = get_console_safely()
    if day is None:
        try:
            day = today()
        except ValueError as exc:
            raise ItsaUsageError(f"Invalid ITSA_SET_DATE: {exc}") from exc
    console.printc("#BOLD#%s#RST#\n", tax_year(day))
