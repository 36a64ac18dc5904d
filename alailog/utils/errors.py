"""Error Classes"""

from abc import ABC


class AlailogError(ABC, Exception):
    """Base class for all alailog errors"""

    _header = "Error: "

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason_msg = reason
        self.message = self._header + reason

    def __str__(self):
        return self.message


class ConfigError(AlailogError):
    """Configuration error"""

    _header = "Configuration Error: "


class ConfigLoadError(ConfigError):
    """Error occurred while loading configuration"""

    _header = "Configuration Load Error: "


class ConfigSaveError(ConfigError):
    """Error occurred while saving configuration"""

    _header = "Configuration Save Error: "


class LogFileError(AlailogError):
    """The log file could not be opened or created"""

    _header = "Log File Error: "
