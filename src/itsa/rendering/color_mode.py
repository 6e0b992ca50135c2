# itsa:header:start
#
#   project      : itsa
#   file         : color_mode.py
#   file_relpath : src/itsa/rendering/color_mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Click-independent color-mode helpers for itsa.

This module provides:

- `ColorMode` enum (AUTO / ON / OFF).
- Parsing of the ``ITSA_COLOR`` environment variable.
- `ColorSettings`, the frozen context object holding the resolved decision.

The coloring decision is made once at startup and then passed around
explicitly; nothing in the rendering layer consults a global flag.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from itsa.config.logging import get_logger
from itsa.constants import COLOR_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from itsa.config.logging import ItsaLogger


logger: ItsaLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when the destination is a terminal.
        ON: Force-enable color regardless of TTY status.
        OFF: Disable color entirely; markup is still consumed.
    """

    AUTO = "auto"
    ON = "on"
    OFF = "off"


def parse_color_mode(value: str | None) -> ColorMode:
    """Interpret a raw ``ITSA_COLOR`` value.

    Only the first character is significant: ``t``/``y`` (any case) select
    `ColorMode.ON`, ``f``/``n`` select `ColorMode.OFF`, anything else
    (including an unset or empty value) selects `ColorMode.AUTO`.

    Examples:
        >>> parse_color_mode("yes")
        <ColorMode.ON: 'on'>
        >>> parse_color_mode("False")
        <ColorMode.OFF: 'off'>
        >>> parse_color_mode(None)
        <ColorMode.AUTO: 'auto'>
    """
    if not value:
        return ColorMode.AUTO
    first = value[0]
    if first in "tTyY":
        return ColorMode.ON
    if first in "fFnN":
        return ColorMode.OFF
    return ColorMode.AUTO


@dataclass(frozen=True)
class ColorSettings:
    """Resolved coloring decision, immutable after startup.

    Attributes:
        mode (ColorMode): The mode the decision was derived from.
        enabled (bool): Whether escape codes are emitted.
    """

    mode: ColorMode
    enabled: bool

    @classmethod
    def on(cls) -> ColorSettings:
        """Settings that always emit escape codes."""
        return cls(mode=ColorMode.ON, enabled=True)

    @classmethod
    def off(cls) -> ColorSettings:
        """Settings that never emit escape codes."""
        return cls(mode=ColorMode.OFF, enabled=False)


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None = None,
    environ: Mapping[str, str] | None = None,
    stdout_isatty: bool | None = None,
) -> ColorSettings:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: `color_mode_override` when not None.
        2. **Environment**: ``ITSA_COLOR`` parsed with `parse_color_mode`.
        3. **Auto**: the TTY status of stdout.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value; None means
            "not provided".
        environ (Mapping[str, str] | None): Environment to read; defaults to `os.environ`.
        stdout_isatty (bool | None): Optional override for TTY detection. When None,
            `sys.stdout.isatty()` is consulted (False on error). Only used in AUTO mode.

    Returns:
        ColorSettings: The frozen decision.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ

    mode: ColorMode = (
        color_mode_override
        if color_mode_override is not None
        else parse_color_mode(env.get(COLOR_ENV_VAR))
    )

    if mode is ColorMode.ON:
        enabled = True
    elif mode is ColorMode.OFF:
        enabled = False
    else:
        if stdout_isatty is None:
            try:
                stdout_isatty = sys.stdout.isatty()
            except (AttributeError, ValueError, OSError):
                stdout_isatty = False
        enabled = bool(stdout_isatty)

    logger.debug("Color mode resolved: mode=%s enabled=%s", mode.value, enabled)
    return ColorSettings(mode=mode, enabled=enabled)
