# itsa:header:start
#
#   project      : itsa
#   file         : markup.py
#   file_relpath : src/itsa/rendering/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Inline color markup expansion.

Program output embeds color tokens of the form ``#NAME#`` where ``NAME`` is
one of the names in [`itsa.rendering.colors.COLOR_TABLE`][]. This module turns
such strings into text carrying the corresponding terminal escape sequences.

Grammar and resolution:
    The expander is a single-pass scanner with two states, *outside* and
    *inside* a token. Bytes are copied to the output as they are read, and a
    mark remembers where the current token started. When a closing ``#`` is
    seen, the accumulated name is looked up:

    - known name: the output is rewound to the mark and the code is written in
      place of the whole ``#NAME#`` span (an empty code elides the span);
    - unknown name: the span's text stays as written, and the closing ``#`` is
      scanned again as the opening delimiter of a new candidate token. This is
      what makes ``#?##RED#x`` come out as ``#?#`` followed by red ``x``.

    When coloring is disabled every closed span resolves to the empty code and
    is removed from the output.

Edge cases:
    - Unterminated token at end of input: everything from the opening ``#`` is
      kept verbatim.
    - Token names longer than `MAX_TOKEN_NAME` bytes stop accumulating and the
      span is resolved as an unknown name, so no bytes are lost.

The scanner works on bytes; [`expand`][itsa.rendering.markup.expand] is the
`str` front end. Escape codes and delimiters are ASCII, so UTF-8 multi-byte
sequences pass through untouched.
"""

from __future__ import annotations

from typing import Final

from itsa.config.logging import get_logger
from itsa.rendering.colors import lookup_bytes

logger = get_logger(__name__)

TOKEN_DELIMITER: Final[int] = ord("#")

#: Longest token name that is looked up; longer names never match.
MAX_TOKEN_NAME: Final[int] = 32

#: Initial capacity of the expansion buffer and the amount it grows by.
BUFFER_INITIAL_CAPACITY: Final[int] = 64
BUFFER_GROWTH_INCREMENT: Final[int] = 64


class ExpansionBuffer:
    """Growable output buffer addressed by integer offsets.

    The buffer keeps a preallocated `bytearray` of `capacity` bytes of which the
    first `length` are content. Capacity always exceeds the content length by
    at least one byte and grows in fixed increments; it never shrinks while in
    use. Callers hold offsets (never views or slices) into the buffer, so
    positions stay meaningful after the storage is reallocated.
    """

    __slots__ = ("_data", "_length")

    def __init__(self, capacity: int = BUFFER_INITIAL_CAPACITY) -> None:
        self._data = bytearray(capacity)
        self._length = 0

    def __len__(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        """Number of bytes currently allocated."""
        return len(self._data)

    def reserve(self, extra: int) -> None:
        """Ensure `extra` more bytes fit while keeping one spare byte.

        Raises:
            MemoryError: Propagated untouched if the allocation fails.
        """
        needed = self._length + extra
        if needed < len(self._data):
            return
        new_capacity = len(self._data)
        while needed >= new_capacity:
            new_capacity += BUFFER_GROWTH_INCREMENT
        grown = bytearray(new_capacity)
        grown[: self._length] = self._data[: self._length]
        self._data = grown

    def append(self, byte: int) -> None:
        """Append a single byte."""
        self.reserve(1)
        self._data[self._length] = byte
        self._length += 1

    def write(self, chunk: bytes) -> None:
        """Append `chunk` at the write cursor."""
        if not chunk:
            return
        self.reserve(len(chunk))
        end = self._length + len(chunk)
        self._data[self._length : end] = chunk
        self._length = end

    def rewind(self, offset: int) -> None:
        """Move the write cursor back to `offset`, discarding what follows."""
        if not 0 <= offset <= self._length:
            raise ValueError(f"offset {offset} outside buffer content (0..{self._length})")
        self._length = offset

    def getvalue(self) -> bytes:
        """Return the content written so far."""
        return bytes(self._data[: self._length])


def expand_bytes(data: bytes, *, enabled: bool = True) -> bytes:
    """Expand ``#NAME#`` color tokens in `data`.

    Args:
        data (bytes): Markup to expand.
        enabled (bool): Whether to emit escape codes. When False, every
            ``#...#`` span is consumed and removed.

    Returns:
        bytes: The expanded output. Input without ``#`` is returned unchanged.
    """
    if TOKEN_DELIMITER not in data:
        return bytes(data)

    out = ExpansionBuffer()
    name = bytearray()
    inside_token = False
    name_overflow = False
    token_start = 0  # output offset of the opening '#'
    pos = 0  # read cursor
    size = len(data)

    while pos < size:
        byte = data[pos]

        if not inside_token:
            if byte == TOKEN_DELIMITER:
                token_start = len(out)
                inside_token = True
                name.clear()
                name_overflow = False
            out.append(byte)
            pos += 1
            continue

        if byte != TOKEN_DELIMITER:
            if len(name) < MAX_TOKEN_NAME:
                name.append(byte)
            else:
                name_overflow = True
            out.append(byte)
            pos += 1
            continue

        # Closing delimiter
        inside_token = False
        code = None if name_overflow and enabled else lookup_bytes(bytes(name), enabled=enabled)

        if code is None:
            # Not a token: keep "#NAME" as text and rescan this '#' as an opener.
            logger.trace("Unknown color token %r kept as text", bytes(name))
            continue

        out.rewind(token_start)
        out.write(code)
        pos += 1

    # An unterminated token is already in the output verbatim.
    return out.getvalue()


def expand(text: str, *, enabled: bool = True) -> str:
    """Expand ``#NAME#`` color tokens in `text`.

    Args:
        text (str): Markup to expand.
        enabled (bool): Whether to emit escape codes. When False, tokens are
            removed and no escape sequences are produced.

    Returns:
        str: The expanded text.

    Examples:
        >>> expand("#BOLD#total#RST#") == "\\x1b[1mtotal\\x1b[0m"
        True
        >>> expand("#BOLD#total#RST#", enabled=False)
        'total'
        >>> expand("issue #42 ok")
        'issue #42 ok'
    """
    if "#" not in text:
        return text
    raw: bytes = text.encode("utf-8", "surrogateescape")
    return expand_bytes(raw, enabled=enabled).decode("utf-8", "surrogateescape")
