from __future__ import annotations

import pytest

from alailog import Color, color_code


@pytest.mark.parametrize(
    "color, code",
    [
        (Color.BLACK, "30"),
        (Color.RED, "31"),
        (Color.GREEN, "32"),
        (Color.YELLOW, "33"),
        (Color.BLUE, "34"),
        (Color.MAGENTA, "35"),
        (Color.CYAN, "36"),
        (Color.WHITE, "37"),
    ],
)
def test_foreground_codes(color, code) -> None:
    assert color.code() == code


@pytest.mark.parametrize("color", [Color.BG_BLACK, Color.BG_WHITE, Color.RESET])
def test_unlisted_tokens_have_no_code(color) -> None:
    assert color.code() == ""


def test_color_code_of_arbitrary_escape_is_empty() -> None:
    assert color_code("\033[2m") == ""
    assert color_code("\033[1;31m") == "31"


def test_tokens_render_as_escape_sequences() -> None:
    assert str(Color.RED) == "\033[1;31m"
    assert str(Color.BG_BLUE) == "\033[44m"
    assert str(Color.RESET) == "\033[0m"
    assert Color.BG_BLACK + Color.RED + "x" == "\033[40m\033[1;31mx"


def test_purple_shares_magenta_escape() -> None:
    assert Color.PURPLE is Color.MAGENTA
    assert Color.PURPLE.code() == "35"


def test_parse_accepts_names_and_escapes() -> None:
    assert Color.parse("red") is Color.RED
    assert Color.parse("BG_CYAN") is Color.BG_CYAN
    assert Color.parse("\033[1;32m") is Color.GREEN
    with pytest.raises(ValueError):
        Color.parse("orange")
