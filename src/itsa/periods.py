# itsa:header:start
#
#   project      : itsa
#   file         : periods.py
#   file_relpath : src/itsa/periods.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Tax-year and obligation-period helpers.

All "current date" decisions go through [`today`][itsa.periods.today] so the
date can be pinned with ``ITSA_SET_DATE=YYYY-MM-DD`` (useful for testing
against the sandbox API, whose obligations are fixed in time).
"""

from __future__ import annotations

import os
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING

from itsa.config.logging import get_logger
from itsa.constants import SET_DATE_ENV_VAR
from itsa.rendering.messages import bool_markup

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)


def parse_date(value: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` date.

    Raises:
        ValueError: If `value` is not a valid ISO date.
    """
    return date.fromisoformat(value.strip())


def now(environ: Mapping[str, str] | None = None) -> datetime:
    """Return the current local time, honoring ``ITSA_SET_DATE``.

    When the override is set, the time is midnight at the start of that day.

    Raises:
        ValueError: If ``ITSA_SET_DATE`` is set but is not a valid date.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    set_date = env.get(SET_DATE_ENV_VAR)
    if not set_date:
        return datetime.now()
    logger.debug("Using %s=%s as the current date", SET_DATE_ENV_VAR, set_date)
    return datetime.combine(parse_date(set_date), time.min)


def today(environ: Mapping[str, str] | None = None) -> date:
    """Return today's date, honoring ``ITSA_SET_DATE``."""
    return now(environ).date()


def tax_year(day: date | None = None) -> str:
    """Return the UK tax year containing `day`, formatted ``YYYY-YY``.

    The tax year runs from 6 April to 5 April.

    Examples:
        >>> tax_year(date(2021, 4, 5))
        '2020-21'
        >>> tax_year(date(2021, 4, 6))
        '2021-22'
    """
    if day is None:
        day = today()
    if (day.month, day.day) <= (4, 5):
        start = day.year - 1
    else:
        start = day.year
    return f"{start}-{(start + 1) % 100:02d}"


def _end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min) + timedelta(days=1) - timedelta(seconds=1)


def period_color(
    start: date,
    end: date,
    due: date,
    met: bool,
    current: datetime | None = None,
) -> str:
    """Return the color markup for an obligation period.

    End and due dates count up to 23:59:59 on the day.

    - ``#GREEN#``: met, and the due date has passed;
    - ``#TANG#``: the period has ended but the due date has not passed;
    - ``""``: the period is in progress;
    - ``#RED#``: not met, and the due date has passed;
    - ``#CHARC#``: anything else (typically a future period).

    Args:
        start (date): First day of the period.
        end (date): Last day of the period.
        due (date): Submission deadline.
        met (bool): Whether the obligation has been fulfilled.
        current (datetime | None): Reference time; defaults to [`now`][itsa.periods.now].

    Returns:
        str: A color token (or the empty string) to prefix the row with.
    """
    if current is None:
        current = now()
    period_start = datetime.combine(start, time.min)
    period_end = _end_of_day(end)
    due_by = _end_of_day(due)

    if met and current > due_by:
        return "#GREEN#"
    if period_end < current <= due_by:
        return "#TANG#"
    if period_start <= current <= period_end:
        return ""
    if not met and current > due_by:
        return "#RED#"
    return "#CHARC#"


def format_period_row(
    start: date,
    end: date,
    due: date,
    received: date | None = None,
    current: datetime | None = None,
) -> str:
    """Format one row of the obligations listing as markup.

    Args:
        start (date): First day of the period.
        end (date): Last day of the period.
        due (date): Submission deadline.
        received (date | None): Date the submission was received, if any.
        current (datetime | None): Reference time; defaults to [`now`][itsa.periods.now].

    Returns:
        str: A newline-terminated markup line.
    """
    met = received is not None
    color = period_color(start, end, due, met, current)
    period_id = f"{start.isoformat()}_{end.isoformat()}"
    return (
        f"{color}  {period_id:<25} {start.isoformat():<12} {end.isoformat():<12} "
        f"{due.isoformat():<12}#RST# {bool_markup(met)}\n"
    )
