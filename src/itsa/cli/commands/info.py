# itsa:header:start
#
#   project      : itsa
#   file         : info.py
#   file_relpath : src/itsa/cli/commands/info.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""itsa `info` command.

Prints the start-up banner: which API (production or sandbox) and which
business the configuration currently points at.
"""

from __future__ import annotations

from pathlib import Path

import click

from itsa.cli.console_helpers import get_console_safely
from itsa.cli.errors import ItsaConfigError
from itsa.config.logging import get_logger
from itsa.config.settings import api_banner_lines, load_config

logger = get_logger(__name__)


@click.command(
    name="info",
    help="Show which API and business itsa is configured to use.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file to read (default: ~/.config/itsa/config.json).",
)
def info_command(*, config_path: Path | None) -> None:
    """Show the configured API and business.

    Args:
        config_path (Path | None): Alternative configuration file.

    Raises:
        ItsaConfigError: If the configuration cannot be loaded.
    """
    console = get_console_safely()
    try:
        config = load_config(config_path)
    except RuntimeError as exc:
        logger.debug("Configuration load failed", exc_info=True)
        raise ItsaConfigError(str(exc)) from exc

    for line in api_banner_lines(config):
        console.info(line)
    if len(config.businesses) > 1:
        console.printc("\n#CHARC#  %3s  %-20s %-19s %s#RST#\n", "idx", "type", "bid", "name")
        for idx, business in enumerate(config.businesses):
            marker = "#BOLD#*#RST#" if business == config.business else " "
            console.printc(
                "  " + marker + "%3d  %-20s %-19s %s\n",
                idx,
                business.btype,
                business.bid,
                business.name or "",
            )
