"""Shared Logger Provider"""

import sys
import threading
from typing import Optional

from alailog.config.io import open_log_file
from alailog.config.models.parameter import Parameter, default_parameter
from alailog.logger import Logger
from alailog.utils.errors import LogFileError
from alailog.utils.logger import LOGGER


class LoggerProvider:
    """
    Process-wide Logger, created on first use.

    The first call builds the logger, including opening its file, and every
    later call gets that same logger back. Parameters passed after that are
    ignored: the shared logger is fixed for the life of the process.
    """

    _instance: Optional[Logger] = None
    _lock = threading.Lock()

    @classmethod
    def initialize(cls, parameter: Optional[Parameter] = None) -> None:
        """Create the shared logger unless it already exists"""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls._create(parameter or default_parameter())
                    return
        if parameter is not None:
            LOGGER.debug("Shared logger already initialized, ignoring new parameters")

    @classmethod
    def instance(cls, parameter: Optional[Parameter] = None) -> Logger:
        """Get the shared logger, creating it from `parameter` on first use"""
        if cls._instance is None or parameter is not None:
            cls.initialize(parameter)
        return cls._instance

    @staticmethod
    def _create(parameter: Parameter) -> Logger:
        LOGGER.debug("Opening log file %s", parameter.filename)
        try:
            file = open_log_file(parameter.filename)
        except LogFileError as e:
            LOGGER.critical("Logger initialization failed: %s", e.reason_msg)
            sys.exit(1)
        return Logger(parameter.to_config(file))


def get_instance(parameter: Optional[Parameter] = None) -> Logger:
    """
    Return the shared logger.

    Args:
        parameter: settings used only if the logger does not exist yet;
            default_parameter() when omitted.

    Returns:
        Logger: the process-wide logger
    """
    return LoggerProvider.instance(parameter)
