"""Text conversion for the printf- and println-style wrappers"""

from typing import Any

from alailog.utils.logger import LOGGER


def sprint(*args: Any) -> str:
    """Concatenate values, with a space between two adjacent non-strings"""
    parts = []
    for i, arg in enumerate(args):
        if i > 0 and not isinstance(arg, str) and not isinstance(args[i - 1], str):
            parts.append(" ")
        parts.append(str(arg))
    return "".join(parts)


def sprintln(*args: Any) -> str:
    """Space separated values followed by a newline"""
    return " ".join(str(arg) for arg in args) + "\n"


def sprintf(format: str, *args: Any) -> str:
    """
    %-style substitution; the format is returned as is when there are no args.

    When the placeholders do not match the arguments the result is the
    format followed by the space separated arguments.
    """
    if not args:
        return format
    try:
        return format % args
    except (TypeError, ValueError, KeyError) as e:
        LOGGER.warning("Bad format string %r: %s", format, e)
        return " ".join([format, *(str(arg) for arg in args)])
