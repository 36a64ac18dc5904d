"""ANSI Color Tokens"""

from enum import Enum
from typing import Union


class Color(str, Enum):
    """Terminal escape sequences for text and background colors"""

    BLACK = "\033[1;30m"
    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    BLUE = "\033[1;34m"
    MAGENTA = "\033[1;35m"
    CYAN = "\033[1;36m"
    # same escape as MAGENTA, so it is an alias of it
    PURPLE = "\033[1;35m"
    WHITE = "\033[1;37m"

    BG_BLACK = "\033[40m"
    BG_RED = "\033[41m"
    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_BLUE = "\033[44m"
    BG_MAGENTA = "\033[45m"
    BG_CYAN = "\033[46m"
    BG_WHITE = "\033[47m"

    RESET = "\033[0m"

    def __str__(self) -> str:
        return self.value

    def code(self) -> str:
        """Two-digit foreground code, or "" for backgrounds and reset"""
        return color_code(self.value)

    @classmethod
    def parse(cls, value: Union["Color", str]) -> "Color":
        """Resolve a color from a member, its escape sequence or its name"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
        raise ValueError(f"Unknown color: {value!r}")


_FOREGROUND_CODES = {
    Color.BLACK.value: "30",
    Color.RED.value: "31",
    Color.GREEN.value: "32",
    Color.YELLOW.value: "33",
    Color.BLUE.value: "34",
    Color.MAGENTA.value: "35",
    Color.CYAN.value: "36",
    Color.WHITE.value: "37",
}


def color_code(token: str) -> str:
    """Look up the numeric code of a foreground escape sequence"""
    return _FOREGROUND_CODES.get(str(token), "")
