# itsa:header:start
#
#   project      : itsa
#   file         : echo.py
#   file_relpath : src/itsa/cli/commands/echo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""itsa `echo` command.

Expands a markup format string the same way the rest of the tool does and
prints it. Handy for scripting around itsa and for checking how a terminal
renders the palette.

Examples:
    ```sh
    itsa echo '#BOLD#%s#RST# is due' 2024-01-31
    itsa echo --kind warning 'No #BOLD#business#RST# selected'
    ```
"""

from __future__ import annotations

import click

from itsa.cli.console_helpers import get_console_safely
from itsa.cli.errors import ItsaUsageError
from itsa.rendering.messages import MessageKind
from itsa.rendering.output import materialize


@click.command(
    name="echo",
    help="Expand #NAME# color markup in FORMAT (printf-style, filled from ARGS) and print it.",
)
@click.argument("fmt", metavar="FORMAT")
@click.argument("args", nargs=-1)
@click.option(
    "--kind",
    type=click.Choice([k.value for k in MessageKind]),
    default=None,
    help="Prefix the output with a message label, e.g. [ERROR].",
)
@click.option(
    "--stderr",
    "to_stderr",
    is_flag=True,
    default=False,
    help="Write to stderr instead of stdout.",
)
@click.option(
    "-n",
    "no_newline",
    is_flag=True,
    default=False,
    help="Do not output the trailing newline.",
)
def echo_command(
    *,
    fmt: str,
    args: tuple[str, ...],
    kind: str | None,
    to_stderr: bool,
    no_newline: bool,
) -> None:
    """Expand and print a markup format string.

    Args:
        fmt (str): printf-style format string with ``#NAME#`` markup.
        args (tuple[str, ...]): Values substituted into `fmt`.
        kind (str | None): Optional message kind for the bracketed prefix.
        to_stderr (bool): Write to stderr instead of stdout.
        no_newline (bool): Suppress the trailing newline.

    Raises:
        ItsaUsageError: If ARGS do not fit FORMAT.
    """
    console = get_console_safely()

    text = materialize(fmt, args)
    if text is None:
        raise ItsaUsageError(f"Arguments {list(args)!r} do not match format {fmt!r}.")
    if not no_newline:
        text += "\n"

    stream = console.err if to_stderr else None
    if kind is not None:
        console.printc_xtra(MessageKind(kind), "%s", text, stream=stream)
    elif to_stderr:
        console.eprintc("%s", text)
    else:
        console.printc("%s", text)
