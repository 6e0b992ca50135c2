# itsa:header:start
#
#   project      : itsa
#   file         : output.py
#   file_relpath : src/itsa/rendering/output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Program output through the markup expander.

Every user-facing line goes through the same three steps:

1. printf-style argument substitution (`materialize`), so markup may come
   from the format string *and* from substituted values;
2. markup expansion ([`itsa.rendering.markup.expand`][]);
3. a single write to the destination stream.

If substitution fails nothing is written at all. Callers must not assume that
a call produced output.

`MarkupConsole` bundles the two destination streams with the frozen
[`ColorSettings`][itsa.rendering.color_mode.ColorSettings] decided at startup.
It is independent from logging: diagnostics go to the logger, program output
goes here.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING, TextIO

import click

from itsa.config.logging import get_logger
from itsa.rendering.color_mode import ColorSettings
from itsa.rendering.markup import expand
from itsa.rendering.messages import MessageKind, format_message

if TYPE_CHECKING:
    from itsa.config.logging import ItsaLogger

logger: ItsaLogger = get_logger(__name__)

#: Message kinds written to the error stream.
STDERR_KINDS: frozenset[MessageKind] = frozenset({MessageKind.ERROR, MessageKind.WARNING})


def materialize(fmt: str, args: tuple[object, ...]) -> str | None:
    """Substitute `args` into the printf-style format `fmt`.

    Substitution is only applied when arguments are given, so a format with
    no arguments is taken literally (a bare ``%`` needs no escaping). A
    single mapping argument fills ``%(name)s`` placeholders.

    Args:
        fmt (str): printf-style format string, possibly containing markup.
        args (tuple[object, ...]): Values to substitute.

    Returns:
        str | None: The materialized text, or None if substitution failed.
    """
    if not args:
        return fmt
    values: object = args[0] if len(args) == 1 and isinstance(args[0], Mapping) else args
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError) as exc:
        logger.debug("Dropping output for format %r: %s", fmt, exc)
        return None


def write_markup(
    stream: TextIO,
    fmt: str,
    *args: object,
    settings: ColorSettings,
) -> None:
    """Materialize, expand and write `fmt % args` to `stream`.

    No newline is appended; format strings carry their own.

    Args:
        stream (TextIO): Destination stream.
        fmt (str): printf-style format string with ``#NAME#`` markup.
        *args (object): Values to substitute.
        settings (ColorSettings): Coloring decision for this process.
    """
    text = materialize(fmt, args)
    if text is None:
        return
    click.echo(expand(text, enabled=settings.enabled), file=stream, nl=False, color=settings.enabled)


class MarkupConsole:
    """Program-output console that understands ``#NAME#`` markup.

    Quiet levels (negative `verbosity`) suppress output: at ``-1`` anything
    bound for stdout is dropped, at ``-2`` warnings are dropped as well. Error
    messages and `eprintc` output are always written.

    Args:
        settings (ColorSettings): Coloring decision made at startup.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.
        verbosity (int): Program-output verbosity (negative for quiet).

    Attributes:
        settings (ColorSettings): Coloring decision; never changes afterwards.
        out (TextIO): Stream for standard output.
        err (TextIO): Stream for error and warning messages.
        verbosity (int): Program-output verbosity.
    """

    settings: ColorSettings
    out: TextIO
    err: TextIO
    verbosity: int

    def __init__(
        self,
        settings: ColorSettings,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
        verbosity: int = 0,
    ) -> None:
        self.settings = settings
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.verbosity = verbosity

    @property
    def enable_color(self) -> bool:
        """Whether escape codes are emitted."""
        return self.settings.enabled

    @property
    def quiet(self) -> bool:
        """Whether stdout output is suppressed."""
        return self.verbosity < 0

    def printc(self, fmt: str = "", *args: object) -> None:
        """Write `fmt % args` to stdout, expanding markup.

        Nothing is written in quiet mode.

        Args:
            fmt (str): printf-style format string with ``#NAME#`` markup.
            *args (object): Values to substitute.
        """
        if self.quiet:
            return
        write_markup(self.out, fmt, *args, settings=self.settings)

    def eprintc(self, fmt: str = "", *args: object) -> None:
        """Like `printc`, but to stderr, and written regardless of quiet mode."""
        write_markup(self.err, fmt, *args, settings=self.settings)

    def printc_xtra(
        self,
        kind: MessageKind,
        fmt: str,
        *args: object,
        stream: TextIO | None = None,
    ) -> None:
        """Write a message of `kind`, prefixed with its bracketed label.

        Args:
            kind (MessageKind): Message kind, selects the prefix.
            fmt (str): printf-style format string with ``#NAME#`` markup.
            *args (object): Values to substitute.
            stream (TextIO | None): Destination; defaults to stderr for errors
                and warnings and to stdout otherwise.
        """
        if stream is None:
            stream = self.err if kind in STDERR_KINDS else self.out
        if kind is not MessageKind.ERROR:
            if self.quiet and stream is self.out:
                return
            if kind is MessageKind.WARNING and self.verbosity <= -2:
                return
        write_markup(stream, format_message(kind, fmt), *args, settings=self.settings)

    def error(self, fmt: str, *args: object) -> None:
        """Write an ``[ERROR]`` message to stderr."""
        self.printc_xtra(MessageKind.ERROR, fmt, *args)

    def warning(self, fmt: str, *args: object) -> None:
        """Write a ``[WARNING]`` message to stderr."""
        self.printc_xtra(MessageKind.WARNING, fmt, *args)

    def info(self, fmt: str, *args: object) -> None:
        """Write an ``[INFO]`` message to stdout."""
        self.printc_xtra(MessageKind.INFO, fmt, *args)

    def confirm(self, fmt: str, *args: object) -> None:
        """Write a ``[CONFIRMATION]`` prompt to stdout."""
        self.printc_xtra(MessageKind.CONFIRM, fmt, *args)

    def success(self, fmt: str, *args: object) -> None:
        """Write an ``[OK]`` message to stdout."""
        self.printc_xtra(MessageKind.SUCCESS, fmt, *args)
