# itsa:header:start
#
#   project      : itsa
#   file         : test_markup.py
#   file_relpath : tests/rendering/test_markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Tests for ``#NAME#`` markup expansion."""

from __future__ import annotations

import pytest

from itsa.rendering.colors import TC_BOLD, TC_GREEN, TC_HI_RED, TC_RED, TC_RST
from itsa.rendering.markup import (
    BUFFER_GROWTH_INCREMENT,
    BUFFER_INITIAL_CAPACITY,
    MAX_TOKEN_NAME,
    ExpansionBuffer,
    expand,
    expand_bytes,
)

# --- Recognized tokens ---


def test_text_without_markup_is_unchanged() -> None:
    assert expand("Submit? (y/N)> ") == "Submit? (y/N)> "
    assert expand("") == ""


def test_known_token_is_replaced() -> None:
    assert expand("#RED#text#RST#") == TC_RED + "text" + TC_RST


def test_tokens_inside_words_and_adjacent() -> None:
    assert expand("a#RST#b") == "a" + TC_RST + "b"
    assert expand("#BOLD##RED#x#RST#") == TC_BOLD + TC_RED + "x" + TC_RST


def test_alias_token() -> None:
    assert expand("[#ERROR#ERROR#RST#] ") == "[" + TC_HI_RED + "ERROR" + TC_RST + "] "


def test_disabled_elides_tokens() -> None:
    assert expand("#RED#text#RST#", enabled=False) == "text"
    assert expand("[#SUCCESS#OK#RST#] done", enabled=False) == "[OK] done"


# --- Ambiguity resolution ---


def test_empty_name_keeps_literal_hash() -> None:
    """``##RED#`` is a literal '#' followed by a real token."""
    assert expand("##RED#text#RST#") == "#" + TC_RED + "text" + TC_RST


def test_unknown_then_known_token() -> None:
    """The unknown span is kept as text and the real token is still found."""
    assert expand("#FOO##RED#text#RST#") == "#FOO#" + TC_RED + "text" + TC_RST


def test_closing_hash_of_unknown_span_reopens() -> None:
    """The closing '#' of an unknown span starts the next candidate token."""
    assert expand("#FOO#RED#x") == "#FOO" + TC_RED + "x"


def test_names_are_case_sensitive() -> None:
    assert expand("#red#x#rst#") == "#red#x#rst#"


@pytest.mark.parametrize(
    "text",
    [
        "issue #42 is #open#",
        "###",
        "#",
        "#a#b#c#",
        "C# and F#",
    ],
)
def test_unresolved_markup_is_lossless(text: str) -> None:
    assert expand(text) == text


def test_disabled_elides_any_closed_span() -> None:
    """With color off, every ``#...#`` span is consumed."""
    assert expand("#FOO#bar", enabled=False) == "bar"
    assert expand("a#b", enabled=False) == "a#b"


# --- Unterminated and over-length tokens ---


@pytest.mark.parametrize("text", ["abc#RED", "abc#", "#RST", "x#RED#y#BOLD"])
def test_unterminated_token_is_flushed_verbatim(text: str) -> None:
    expected = text.replace("#RED#", TC_RED)
    assert expand(text) == expected


def test_unterminated_token_when_disabled() -> None:
    assert expand("abc#RED", enabled=False) == "abc#RED"


def test_overlong_name_is_kept() -> None:
    name = "B" * (MAX_TOKEN_NAME + 8)
    text = f"#{name}#x"
    assert expand(text) == text


def test_overlong_name_does_not_hide_following_token() -> None:
    name = "Z" * (MAX_TOKEN_NAME * 2)
    assert expand(f"#{name}#GREEN#go") == f"#{name}" + TC_GREEN + "go"


def test_overlong_name_elided_when_disabled() -> None:
    name = "B" * (MAX_TOKEN_NAME + 1)
    assert expand(f"#{name}#x", enabled=False) == "x"


# --- Encoding ---


def test_multibyte_text_passes_through() -> None:
    assert expand("#GREEN#£100 été#RST#") == TC_GREEN + "£100 été" + TC_RST
    assert expand("é#é") == "é#é"


def test_expand_bytes() -> None:
    assert expand_bytes(b"#BOLD#x") == TC_BOLD.encode() + b"x"
    assert expand_bytes(b"no markup") == b"no markup"
    assert expand_bytes(b"#BOLD#x", enabled=False) == b"x"


# --- Buffer growth ---


def test_large_input_survives_many_reallocations() -> None:
    count = 1500
    expected = "".join(TC_RED + "x" + TC_RST for _ in range(count))
    assert expand("#RED#x#RST#" * count) == expected


def test_long_plain_run_before_token() -> None:
    prefix = "p" * (BUFFER_INITIAL_CAPACITY * 3 + 1)
    assert expand(prefix + "#RED#!") == prefix + TC_RED + "!"


def test_token_start_survives_growth() -> None:
    """A token opened before a reallocation is rewound to the right offset."""
    head = "h" * (BUFFER_INITIAL_CAPACITY - 2)
    assert expand(head + "#BOLD#t") == head + TC_BOLD + "t"


def test_buffer_grows_in_fixed_increments() -> None:
    buf = ExpansionBuffer()
    assert buf.capacity == BUFFER_INITIAL_CAPACITY

    buf.write(b"a" * (BUFFER_INITIAL_CAPACITY - 1))
    assert buf.capacity == BUFFER_INITIAL_CAPACITY

    buf.append(ord("b"))
    assert buf.capacity == BUFFER_INITIAL_CAPACITY + BUFFER_GROWTH_INCREMENT
    assert len(buf) == BUFFER_INITIAL_CAPACITY
    assert buf.getvalue() == b"a" * (BUFFER_INITIAL_CAPACITY - 1) + b"b"


def test_buffer_always_keeps_a_spare_byte() -> None:
    buf = ExpansionBuffer()
    for i in range(1000):
        buf.write(bytes([65 + i % 26]) * (i % 7))
        assert buf.capacity >= len(buf) + 1
        assert (buf.capacity - BUFFER_INITIAL_CAPACITY) % BUFFER_GROWTH_INCREMENT == 0


def test_buffer_rewind() -> None:
    buf = ExpansionBuffer()
    buf.write(b"hello#RED")
    capacity = buf.capacity
    buf.rewind(5)
    assert buf.getvalue() == b"hello"
    assert buf.capacity == capacity
    with pytest.raises(ValueError):
        buf.rewind(6)
    with pytest.raises(ValueError):
        buf.rewind(-1)
