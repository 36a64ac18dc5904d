"""alailog: leveled, colored logging to a file, stdout and stderr"""

from alailog.api import (
    debug,
    debugf,
    debugln,
    disable_debug_mode,
    enable_debug_mode,
    error,
    errorf,
    errorln,
    fatal,
    fatalf,
    fatalln,
    info,
    infof,
    infoln,
    printf,
    println,
    warn,
    warnf,
    warning,
    warningf,
    warningln,
    warnln,
)
from alailog.color import Color, color_code
from alailog.config.io import load_parameter, open_log_file, save_parameter
from alailog.config.models.parameter import (
    DEFAULT_FILE,
    LoggerConfig,
    Parameter,
    default_parameter,
)
from alailog.debugger import Debugger
from alailog.level import Level
from alailog.logger import Logger, new_logger
from alailog.provider import LoggerProvider, get_instance
from alailog.utils.errors import (
    AlailogError,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    LogFileError,
)

__all__ = [
    "AlailogError",
    "Color",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSaveError",
    "DEFAULT_FILE",
    "Debugger",
    "Level",
    "LogFileError",
    "Logger",
    "LoggerConfig",
    "LoggerProvider",
    "Parameter",
    "color_code",
    "debug",
    "debugf",
    "debugln",
    "default_parameter",
    "disable_debug_mode",
    "enable_debug_mode",
    "error",
    "errorf",
    "errorln",
    "fatal",
    "fatalf",
    "fatalln",
    "get_instance",
    "info",
    "infof",
    "infoln",
    "load_parameter",
    "new_logger",
    "open_log_file",
    "printf",
    "println",
    "save_parameter",
    "warn",
    "warnf",
    "warning",
    "warningf",
    "warningln",
    "warnln",
]
