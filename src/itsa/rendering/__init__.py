# itsa:header:start
#
#   project      : itsa
#   file         : __init__.py
#   file_relpath : src/itsa/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Rendering helpers for itsa program output (color table, markup, console)."""

from __future__ import annotations

from itsa.rendering.color_mode import ColorMode, ColorSettings, resolve_color_mode
from itsa.rendering.markup import expand, expand_bytes
from itsa.rendering.messages import MessageKind, format_message
from itsa.rendering.output import MarkupConsole, write_markup

__all__ = [
    "ColorMode",
    "ColorSettings",
    "MarkupConsole",
    "MessageKind",
    "expand",
    "expand_bytes",
    "format_message",
    "resolve_color_mode",
    "write_markup",
]
