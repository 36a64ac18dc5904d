"""Severity Levels"""

from enum import IntEnum
from typing import Union


class Level(IntEnum):
    """
    Severity of a message, and the threshold a logger filters against.

    Members are ordered: a message passes a threshold when
    ``message_level >= threshold``. ``ALL`` as threshold admits everything,
    ``OFF`` admits nothing.
    """

    ALL = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    OFF = 6

    @classmethod
    def parse(cls, value: Union["Level", int, str]) -> "Level":
        """Resolve a level from a member, an ordinal or a case-insensitive name"""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().upper()
            name = _ALIASES.get(name, name)
            if name in cls.__members__:
                return cls[name]
        raise ValueError(f"Unknown log level: {value!r}")


_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
    "NONE": "OFF",
}
