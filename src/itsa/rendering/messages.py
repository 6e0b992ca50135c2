# itsa:header:start
#
#   project      : itsa
#   file         : messages.py
#   file_relpath : src/itsa/rendering/messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Message kinds and their canned markup prefixes.

Key types:
    - `MessageKind`: `str, Enum` whose value is the kind's textual id and which
      also carries the color token and the label shown between brackets.

Design:
    Like a colored enum, `MessageKind` keeps `_value_` as the plain `str`
    and stores the token and label separately, so Enum semantics (hashing,
    equality, `repr`) are preserved and click can use the values as choices.

Example:
    ```python
    format_message(MessageKind.ERROR, "Couldn't get calculation. (%s)\\n")
    # '[#ERROR#ERROR#RST#] Couldn't get calculation. (%s)\\n'
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Final

# Section labels used above lists of API messages
MSG_INFO_LABEL: Final[str] = "#HI_BLUE#INFO#RST#"
MSG_WARN_LABEL: Final[str] = "#HI_YELLOW#WARNINGS#RST#"
MSG_ERR_LABEL: Final[str] = "#HI_RED#ERRORS#RST#"

# Boolean markers for tabular output
STRUE: Final[str] = "#HI_GREEN#t#RST#"
SFALSE: Final[str] = "#HI_RED#f#RST#"


class MessageKind(str, Enum):
    """Closed set of message kinds with a bracketed, colored prefix."""

    _value_: str
    _token: str
    _label: str

    def __new__(cls, text: str, token: str, label: str) -> MessageKind:
        """Construct a message kind member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            token (str): Color token name used for the label.
            label (str): Text shown between the brackets.

        Returns:
            MessageKind: The newly constructed enum member.
        """
        obj: MessageKind = str.__new__(cls, text)
        obj._value_ = text
        obj._token = token
        obj._label = label
        return obj

    ERROR = ("error", "ERROR", "ERROR")
    WARNING = ("warning", "WARNING", "WARNING")
    INFO = ("info", "INFO", "INFO")
    CONFIRM = ("confirm", "CONFIRM", "CONFIRMATION")
    SUCCESS = ("success", "SUCCESS", "OK")

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def label(self) -> str:
        """Text shown between the brackets (e.g. ``OK`` for SUCCESS)."""
        return self._label

    @property
    def prefix(self) -> str:
        """Markup prefix, e.g. ``[#SUCCESS#OK#RST#] ``."""
        return f"[#{self._token}#{self._label}#RST#] "


def format_message(kind: MessageKind, fmt: str) -> str:
    """Prepend the prefix for `kind` to the format string `fmt`."""
    return kind.prefix + fmt


def bool_markup(value: bool) -> str:
    """Return the colored ``t`` / ``f`` marker for `value`."""
    return STRUE if value else SFALSE
