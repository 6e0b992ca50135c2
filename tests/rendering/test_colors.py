# itsa:header:start
#
#   project      : itsa
#   file         : test_colors.py
#   file_relpath : tests/rendering/test_colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# itsa:header:end

"""Tests for the color table and name lookups."""

from __future__ import annotations

import pytest

from itsa.rendering import colors
from itsa.rendering.colors import COLOR_TABLE, COLOR_TABLE_BYTES, lookup, lookup_bytes


def test_table_holds_exactly_the_documented_names() -> None:
    """The closed name set must not drift."""
    assert set(COLOR_TABLE) == {
        "HI_YELLOW",
        "HI_GREEN",
        "HI_RED",
        "HI_BLUE",
        "GREEN",
        "RED",
        "BLUE",
        "CHARC",
        "TANG",
        "BOLD",
        "RST",
        "MSG_INFO",
        "MSG_WARN",
        "MSG_ERR",
        "INFO",
        "CONFIRM",
        "WARNING",
        "SUCCESS",
        "ERROR",
        "STRUE",
        "SFALSE",
    }


@pytest.mark.parametrize(
    ("alias", "target"),
    [
        ("MSG_INFO", colors.TC_HI_BLUE),
        ("MSG_WARN", colors.TC_HI_YELLOW),
        ("MSG_ERR", colors.TC_HI_RED),
        ("INFO", colors.TC_BLUE),
        ("CONFIRM", colors.TC_CHARC),
        ("WARNING", colors.TC_HI_YELLOW),
        ("SUCCESS", colors.TC_HI_GREEN),
        ("ERROR", colors.TC_HI_RED),
        ("STRUE", colors.TC_HI_GREEN),
        ("SFALSE", colors.TC_HI_RED),
    ],
)
def test_aliases_share_codes(alias: str, target: str) -> None:
    """Intent names map onto the base palette."""
    assert lookup(alias) == target


def test_codes_are_sgr_sequences() -> None:
    """Every code is a non-empty ESC[...m sequence without delimiters."""
    for code in COLOR_TABLE.values():
        assert code.startswith("\x1b[")
        assert code.endswith("m")
        assert "#" not in code


def test_lookup_is_exact_and_case_sensitive() -> None:
    """Near misses are not tokens."""
    assert lookup("RED") == "\x1b[38;5;160m"
    assert lookup("red") is None
    assert lookup(" RED") is None
    assert lookup("") is None


def test_lookup_disabled_maps_everything_to_empty() -> None:
    """With color off even unknown names resolve to the empty code."""
    assert lookup("RED", enabled=False) == ""
    assert lookup("NOT_A_COLOR", enabled=False) == ""


def test_byte_table_mirrors_text_table() -> None:
    """The expander's byte view agrees with the text table."""
    assert len(COLOR_TABLE_BYTES) == len(COLOR_TABLE)
    for name, code in COLOR_TABLE.items():
        assert lookup_bytes(name.encode()) == code.encode()
    assert lookup_bytes(b"NOPE") is None
    assert lookup_bytes(b"NOPE", enabled=False) == b""


def test_table_is_read_only() -> None:
    """The table cannot be modified at runtime."""
    with pytest.raises(TypeError):
        COLOR_TABLE["RED"] = ""  # type: ignore[index]
