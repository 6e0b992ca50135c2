# itsa:header:start
#
#   project      : itsa
#   file         : main.py
#   file_relpath : src/itsa/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Click entry point for the itsa CLI.

Key ideas:
- Group-level options are resolved once and placed into ``ctx.obj``.
- The coloring decision is made here, once, and frozen into the console that
  every subcommand writes through.
"""

from __future__ import annotations

import click

from itsa.cli.commands.colors import colors_command
from itsa.cli.commands.echo import echo_command
from itsa.cli.commands.info import info_command
from itsa.cli.commands.period import period_command
from itsa.cli.commands.tax_year import tax_year_command
from itsa.cli.commands.version import version_command
from itsa.cli.errors import ItsaError
from itsa.cli.options import (
    common_color_options,
    common_verbose_options,
    effective_color_override,
    resolve_verbosity,
)
from itsa.config.logging import get_logger, resolve_env_log_level, setup_logging
from itsa.rendering.color_mode import resolve_color_mode
from itsa.rendering.output import MarkupConsole

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    verbosity = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbosity

    setup_logging(level=resolve_env_log_level())

    settings = resolve_color_mode(
        color_mode_override=effective_color_override(color_mode, no_color),
    )
    ctx.color = settings.enabled

    ctx.obj["console"] = MarkupConsole(settings, verbosity=verbosity)


class ItsaGroup(click.Group):
    """Click group that reports itsa errors through the project console.

    Click only displays a `ClickException` after the context has been torn
    down. Errors raised by subcommands are shown here instead, while
    ``ctx.obj["console"]`` is still reachable, and the process then exits with
    the error's own exit code.
    """

    def invoke(self, ctx: click.Context) -> object:
        """Invoke the group, displaying `ItsaError` through the console."""
        try:
            return super().invoke(ctx)
        except ItsaError as exc:
            exc.show()
            ctx.exit(exc.exit_code)


@click.group(
    cls=ItsaGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="itsa - UK Income Tax Self-Assessment via HMRC MTD.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the itsa CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: MarkupConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None and not console.quiet:
        console.printc("Hint: use '#BOLD#itsa COMMAND --help#RST#' for command details.\n\n")
        # Help text mentions '#NAME#' literally and must not go through the expander.
        click.echo(ctx.get_help(), file=console.out, color=ctx.color)


cli.add_command(version_command)

cli.add_command(colors_command)

cli.add_command(echo_command)

cli.add_command(info_command)

cli.add_command(tax_year_command)

cli.add_command(period_command)

if __name__ == "__main__":
    cli()
