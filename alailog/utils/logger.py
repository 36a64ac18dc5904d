"""Diagnostics Logger Module"""

import os
import sys

import logging
import colorlog


LOG_LEVEL_ENV = "ALAILOG_LOG_LEVEL"


class Diagnostics:
    """Holds the logger alailog reports its own problems to"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Diagnostics, cls).__new__(cls)
            cls._instance.__init__()
        return cls._instance

    def __init__(self):
        if not hasattr(self, "_logger"):
            self._logger = None

    @property
    def logger(self) -> logging.Logger:
        """Build the logger on first access"""
        if not hasattr(self, "_logger") or self._logger is None:
            self._logger = self.setup_logger()
        return self._logger

    def setup_logger(self, name: str = "alailog") -> logging.Logger:
        """
        Configure and return the diagnostics logger.

        The level comes from the ALAILOG_LOG_LEVEL environment variable and
        falls back to WARNING, so a healthy process prints nothing.

        Args:
            name (str, optional): logger name. Defaults to "alailog".

        Returns:
            logging.Logger: the configured logger
        """
        logger_instance = colorlog.getLogger(name)

        if logger_instance.handlers:
            return logger_instance

        level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

        logger_instance.setLevel(level)
        logger_instance.propagate = False

        # stderr only; stdout belongs to the messages being logged
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)

        formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )

        console_handler.setFormatter(formatter)
        logger_instance.addHandler(console_handler)

        return logger_instance


LOGGER = Diagnostics().logger
