"""
Package-level logging functions.

Each function fetches the shared logger, creating it with the default
parameters on first use, and forwards to the Logger method of the same
name. Functions without a suffix concatenate their arguments, spacing
adjacent non-string values; ``f`` variants use %-formatting and ``ln``
variants separate arguments with spaces and end with a newline.
"""

from typing import Any

from alailog.formatting import sprint
from alailog.provider import get_instance


def info(*args: Any) -> None:
    get_instance().info(sprint(*args))


def infof(format: str, *args: Any) -> None:
    """Example: infof("User %s logged in", username)"""
    get_instance().infof(format, *args)


def infoln(*args: Any) -> None:
    get_instance().infoln(*args)


def printf(format: str, *args: Any) -> None:
    get_instance().infof(format, *args)


def println(*args: Any) -> None:
    get_instance().infoln(*args)


def warn(*args: Any) -> None:
    get_instance().warn(sprint(*args))


def warnf(format: str, *args: Any) -> None:
    get_instance().warnf(format, *args)


def warnln(*args: Any) -> None:
    get_instance().warnln(*args)


warning = warn
warningf = warnf
warningln = warnln


def error(*args: Any) -> None:
    get_instance().error(sprint(*args))


def errorf(format: str, *args: Any) -> None:
    get_instance().errorf(format, *args)


def errorln(*args: Any) -> None:
    get_instance().errorln(*args)


def fatal(*args: Any) -> None:
    """Log at FATAL level. Does not exit; callers decide what happens next."""
    get_instance().fatal(sprint(*args))


def fatalf(format: str, *args: Any) -> None:
    get_instance().fatalf(format, *args)


def fatalln(*args: Any) -> None:
    get_instance().fatalln(*args)


def debug(*args: Any) -> None:
    get_instance().debug(sprint(*args), stacklevel=2)


def debugf(format: str, *args: Any) -> None:
    get_instance().debugf(format, *args, stacklevel=2)


def debugln(*args: Any) -> None:
    get_instance().debugln(*args, stacklevel=2)


def enable_debug_mode() -> None:
    get_instance().enable_debug_mode()


def disable_debug_mode() -> None:
    get_instance().disable_debug_mode()
