# itsa:header:start
#
#   project      : itsa
#   file         : colors.py
#   file_relpath : src/itsa/rendering/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Named terminal color codes used by the markup language.

The table is closed and fixed at import time: markup can only refer to the
names listed in `COLOR_TABLE`. Several names are aliases that exist so that
output strings describe *intent* (``#ERROR#``, ``#STRUE#``) rather than a hue.

Lookups are exact and case-sensitive. A miss is a normal outcome meaning
"this is not a token", never an error.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

# 256-color SGR sequences
TC_HI_YELLOW: Final[str] = "\x1b[38;5;11m"
TC_HI_GREEN: Final[str] = "\x1b[38;5;10m"
TC_HI_RED: Final[str] = "\x1b[38;5;9m"
TC_HI_BLUE: Final[str] = "\x1b[38;5;33m"
TC_GREEN: Final[str] = "\x1b[38;5;40m"
TC_RED: Final[str] = "\x1b[38;5;160m"
TC_BLUE: Final[str] = "\x1b[38;5;75m"
TC_CHARC: Final[str] = "\x1b[38;5;8m"
TC_TANG: Final[str] = "\x1b[38;5;220m"

TC_BOLD: Final[str] = "\x1b[1m"
TC_RST: Final[str] = "\x1b[0m"

COLOR_TABLE: Final[Mapping[str, str]] = MappingProxyType(
    {
        "HI_YELLOW": TC_HI_YELLOW,
        "HI_GREEN": TC_HI_GREEN,
        "HI_RED": TC_HI_RED,
        "HI_BLUE": TC_HI_BLUE,
        "GREEN": TC_GREEN,
        "RED": TC_RED,
        "BLUE": TC_BLUE,
        "CHARC": TC_CHARC,
        "TANG": TC_TANG,
        "BOLD": TC_BOLD,
        "RST": TC_RST,
        # Section labels
        "MSG_INFO": TC_HI_BLUE,
        "MSG_WARN": TC_HI_YELLOW,
        "MSG_ERR": TC_HI_RED,
        # Message kinds
        "INFO": TC_BLUE,
        "CONFIRM": TC_CHARC,
        "WARNING": TC_HI_YELLOW,
        "SUCCESS": TC_HI_GREEN,
        "ERROR": TC_HI_RED,
        # Boolean markers
        "STRUE": TC_HI_GREEN,
        "SFALSE": TC_HI_RED,
    }
)

# Byte-encoded view used by the expander; escape codes are pure ASCII.
COLOR_TABLE_BYTES: Final[Mapping[bytes, bytes]] = MappingProxyType(
    {name.encode("ascii"): code.encode("ascii") for name, code in COLOR_TABLE.items()}
)


def lookup(name: str, *, enabled: bool = True) -> str | None:
    """Return the escape code bound to `name`.

    Args:
        name (str): Token name without the surrounding ``#`` delimiters.
        enabled (bool): When False every name resolves to the empty code, so
            markup is still consumed but no escape bytes are produced.

    Returns:
        str | None: The escape code, ``""`` when coloring is disabled, or None
            when `name` is not in the table.
    """
    if not enabled:
        return ""
    return COLOR_TABLE.get(name)


def lookup_bytes(name: bytes, *, enabled: bool = True) -> bytes | None:
    """Byte-level counterpart of [`lookup`][itsa.rendering.colors.lookup]."""
    if not enabled:
        return b""
    return COLOR_TABLE_BYTES.get(name)
