"""Logger Module"""

import sys
import threading
import time
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional, TextIO, Union

from alailog.color import Color
from alailog.config.models.parameter import DEFAULT_TIMESTAMP_FORMAT, LoggerConfig
from alailog.debugger import Debugger
from alailog.formatting import sprintf, sprintln
from alailog.level import Level
from alailog.utils.logger import LOGGER


class Logger:
    """
    Writes messages to a file, stdout and stderr, filtered by severity.

    The logger copies its settings out of a LoggerConfig and lets them be
    changed afterwards through the setters. Messages are written exactly as
    given, apart from the optional timestamp prefix and color wrapping, and
    no newline is added: the ``*ln`` wrappers do that.

    In color mode every message is written whatever its level. Only the
    plain path compares the level against the threshold.

    Every public call holds the logger's lock while it formats and writes,
    so concurrent messages never interleave within a sink. The file is
    never closed by the logger.
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        config = config or LoggerConfig()
        self._lock = threading.RLock()
        self._file: Optional[TextIO] = config.file
        self._level = config.level
        self._stdout = config.stdout
        self._stderr = config.stderr
        self._color = config.color
        self._text_color: Color = config.text_color
        self._bg_color: Color = config.bg_color
        self._timestamps = config.timestamps
        self._timestamp_format = config.timestamp_format
        self.debug_mode = True
        self.debugger = Debugger()

    # Settings

    @property
    def file(self) -> Optional[TextIO]:
        return self._file

    @property
    def level(self) -> Level:
        return self._level

    @property
    def stdout(self) -> bool:
        return self._stdout

    @property
    def stderr(self) -> bool:
        return self._stderr

    @property
    def color(self) -> bool:
        return self._color

    @property
    def text_color(self) -> Color:
        return self._text_color

    @property
    def bg_color(self) -> Color:
        return self._bg_color

    @property
    def timestamps(self) -> bool:
        return self._timestamps

    @property
    def timestamp_format(self) -> str:
        return self._timestamp_format

    def set_level(self, level: Union[Level, int, str]) -> None:
        with self._lock:
            self._level = Level.parse(level)

    def set_stdout(self, stdout: bool) -> None:
        with self._lock:
            self._stdout = stdout

    def set_stderr(self, stderr: bool) -> None:
        with self._lock:
            self._stderr = stderr

    def set_text_color(self, color: Union[Color, str]) -> None:
        """Foreground used when log() runs in color mode: a Color, its escape sequence or its name"""
        with self._lock:
            self._text_color = Color.parse(color)

    def set_bg_color(self, color: Union[Color, str]) -> None:
        with self._lock:
            self._bg_color = Color.parse(color)

    def enable_debug_mode(self) -> None:
        with self._lock:
            self.debug_mode = True

    def disable_debug_mode(self) -> None:
        with self._lock:
            self.debug_mode = False

    def enable_timestamps(self) -> None:
        with self._lock:
            self._timestamps = True

    def disable_timestamps(self) -> None:
        with self._lock:
            self._timestamps = False

    def set_timestamp_format(self, timestamp_format: str) -> None:
        """strftime pattern for the prefix; an empty string restores the default"""
        with self._lock:
            self._timestamp_format = timestamp_format

    # Core

    def log(self, level: Union[Level, int], message: Any) -> None:
        """
        Log a message at the given level.

        The timestamp, if enabled, is prefixed first. In color mode the
        message is then wrapped with the configured colors and written
        unconditionally. Otherwise it is written only when ``level`` is at
        least the logger's threshold.
        """
        with self._lock:
            text = self._stamp(str(message))
            if self._color:
                self._write(self._paint(self._text_color, text))
            elif level >= self._level:
                self._write(text)

    def log_color(self, level: Union[Level, int], color: Union[Color, str], message: Any) -> None:
        """
        Log a message in the given foreground color.

        Outside color mode this is exactly log(level, message).
        """
        with self._lock:
            if not self._color:
                self.log(level, message)
                return
            self._write(self._paint(color, self._stamp(str(message))))

    def _stamp(self, text: str) -> str:
        if not self._timestamps:
            return text
        timestamp_format = self._timestamp_format or DEFAULT_TIMESTAMP_FORMAT
        return f"[{datetime.now().strftime(timestamp_format)}] {text}"

    def _paint(self, color: Union[Color, str], text: str) -> str:
        return str(self._bg_color) + str(color) + text + str(Color.RESET)

    def _write(self, text: str) -> None:
        # a failing sink must not keep the others from receiving the message
        if self._file is not None:
            self._write_to("file", self._file, text)
        if self._stdout:
            self._write_to("stdout", sys.stdout, text)
        if self._stderr:
            self._write_to("stderr", sys.stderr, text)

    @staticmethod
    def _write_to(name: str, stream: Optional[TextIO], text: str) -> None:
        # sys.stdout and sys.stderr are None under pythonw and some daemons
        if stream is None:
            return
        try:
            stream.write(text)
            stream.flush()
        except Exception as e:
            LOGGER.warning("Failed to write log message to %s: %s", name, e)

    # Levels

    def debug_log(self, skip: int = 0) -> bool:
        """
        Emit the caller-location line if debug mode is on.

        ``skip=0`` describes the function calling debug_log, ``skip=1`` its
        caller. Returns whether debug mode is on.
        """
        with self._lock:
            if not self.debug_mode:
                return False
            self.log(Level.DEBUG, self.debugger.debug_message(skip + 1))
            return True

    def debug(self, message: Any, *, stacklevel: int = 1) -> None:
        """Log at DEBUG level, preceded by where it was called from. No-op outside debug mode."""
        if self.debug_log(stacklevel):
            self.log(Level.DEBUG, message)

    def info(self, message: Any) -> None:
        self.log(Level.INFO, message)

    def warn(self, message: Any) -> None:
        self.log(Level.WARN, message)

    warning = warn

    def error(self, message: Any) -> None:
        self.log(Level.ERROR, message)

    def fatal(self, message: Any) -> None:
        """Log at FATAL level. The process keeps running."""
        self.log(Level.FATAL, message)

    def debug_color(self, color: Union[Color, str], message: Any) -> None:
        self.log_color(Level.DEBUG, color, message)

    def info_color(self, color: Union[Color, str], message: Any) -> None:
        self.log_color(Level.INFO, color, message)

    def warn_color(self, color: Union[Color, str], message: Any) -> None:
        self.log_color(Level.WARN, color, message)

    def error_color(self, color: Union[Color, str], message: Any) -> None:
        self.log_color(Level.ERROR, color, message)

    def fatal_color(self, color: Union[Color, str], message: Any) -> None:
        self.log_color(Level.FATAL, color, message)

    def debug_black(self, message: Any) -> None:
        self.debug_color(Color.BLACK, message)

    # Formatting wrappers

    def logf(self, format: str, *args: Any) -> None:
        self.log(Level.INFO, sprintf(format, *args))

    def debugf(self, format: str, *args: Any, stacklevel: int = 1) -> None:
        self.debug(sprintf(format, *args), stacklevel=stacklevel + 1)

    def infof(self, format: str, *args: Any) -> None:
        """Log at INFO level, e.g. infof("Received %d bytes", size)"""
        self.info(sprintf(format, *args))

    printf = infof

    def warnf(self, format: str, *args: Any) -> None:
        self.warn(sprintf(format, *args))

    warningf = warnf

    def errorf(self, format: str, *args: Any) -> None:
        self.error(sprintf(format, *args))

    def fatalf(self, format: str, *args: Any) -> None:
        self.fatal(sprintf(format, *args))

    def debugln(self, *args: Any, stacklevel: int = 1) -> None:
        self.debug(sprintln(*args), stacklevel=stacklevel + 1)

    def infoln(self, *args: Any) -> None:
        self.info(sprintln(*args))

    println = infoln

    def warnln(self, *args: Any) -> None:
        self.warn(sprintln(*args))

    warningln = warnln

    def errorln(self, *args: Any) -> None:
        self.error(sprintln(*args))

    def fatalln(self, *args: Any) -> None:
        self.fatal(sprintln(*args))

    def print_map(self, mapping: Mapping[Any, Any]) -> None:
        """Log one "key: value" line per entry at INFO level"""
        for key, value in mapping.items():
            self.log(Level.INFO, f"{key}: {value}\n")

    # Introspection helpers

    def print_function_name(self, steps: int = 0) -> None:
        """Log the name of the function `steps` frames above the caller"""
        self.infof("Function name %s\n", self.debugger.get_function_name(steps + 1))

    def print_file_and_line_number(self, steps: int = 0) -> None:
        file, line = self.debugger.get_file_and_line_number(steps + 1)
        self.infof("File: %s, Line: %d\n", file, line)

    def log_var(self, name: str, value: Any) -> None:
        self.infof("Variable: %s, Value: %s\n", name, value)

    def elapsed_execution_time(self, start: float, name: str) -> None:
        """
        Log how long something took.

        ``start`` is a time.perf_counter() reading taken before the work.
        """
        elapsed = timedelta(seconds=time.perf_counter() - start)
        self.infof("%s took %s\n", name, elapsed)


def new_logger(
    file: Optional[TextIO],
    level: Union[Level, int, str],
    stdout: bool,
    stderr: bool,
    color: bool,
    bg_color: Union[Color, str] = Color.BG_BLACK,
    text_color: Union[Color, str] = Color.WHITE,
    timestamps: bool = False,
    timestamp_format: str = "",
) -> Logger:
    """Build a Logger from explicit settings"""
    return Logger(
        LoggerConfig(
            file=file,
            level=level,
            stdout=stdout,
            stderr=stderr,
            color=color,
            bg_color=bg_color,
            text_color=text_color,
            timestamps=timestamps,
            timestamp_format=timestamp_format,
        )
    )
