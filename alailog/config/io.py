"""IO Handlers for Logger Settings and Log Files"""

import json
import tempfile
import os
from typing import Optional, Dict, TextIO, TypeVar, Generic, Union
from pathlib import Path

from pydantic import ValidationError

from alailog.utils.errors import ConfigLoadError, ConfigSaveError, LogFileError
from alailog.utils.logger import LOGGER

from .models.parameter import Parameter

T = TypeVar("T")


class CacheManager(Generic[T]):
    """Parsed settings keyed by path, invalidated when the file changes"""

    def __init__(self):
        self._cache: Dict[Path, tuple[T, float]] = {}

    def get(self, config_path: Path) -> Optional[T]:
        """Return the cached entry if the file has not been modified since"""
        if config_path in self._cache:
            cached_config, last_modified = self._cache[config_path]
            if last_modified == config_path.stat().st_mtime:
                return cached_config
        return None

    def set(self, config_path: Path, config: T) -> None:
        self._cache[config_path] = (config, config_path.stat().st_mtime)

    def clear(self, config_path: Path) -> None:
        if config_path in self._cache:
            del self._cache[config_path]


parameter_cache = CacheManager[Parameter]()


def load_parameter(config_path: Union[str, Path]) -> Optional[Parameter]:
    """
    Load logger settings from a JSON file

    Args:
        config_path: path of the settings file

    Returns:
        Parameter object, or None if the file does not exist

    Raises:
        ConfigLoadError: when the file cannot be read or fails validation
    """
    config_path = Path(config_path)
    try:
        if not config_path.exists():
            LOGGER.warning("Logger settings file not found: %s", config_path)
            return None

        cached_config = parameter_cache.get(config_path)
        if cached_config is not None:
            return cached_config

        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        config = Parameter(**data)
        parameter_cache.set(config_path, config)
        return config

    except json.JSONDecodeError as e:
        LOGGER.error("Invalid JSON format in logger settings: %s", e)
        raise ConfigLoadError(f"Invalid JSON format in logger settings: {e}") from e
    except (ValidationError, TypeError) as e:
        LOGGER.error("Invalid logger settings in %s: %s", config_path, e)
        raise ConfigLoadError(f"Invalid logger settings in {config_path}: {e}") from e
    except OSError as e:
        LOGGER.error("Failed to load logger settings: %s", e)
        raise ConfigLoadError(f"Failed to load logger settings: {e}") from e


def save_parameter(config: Parameter, config_path: Union[str, Path]) -> bool:
    """
    Save logger settings as JSON

    Args:
        config: settings to write
        config_path: destination path

    Returns:
        True once the file has been replaced

    Raises:
        ConfigSaveError: when the file cannot be written
    """
    config_path = Path(config_path)
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # write to a temp file first so readers never see a partial file
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", delete=False, dir=config_path.parent
        ) as tf:
            json.dump(config.model_dump(mode="json"), tf, ensure_ascii=False, indent=4)
            temp_path = tf.name

        os.replace(temp_path, config_path)

        parameter_cache.clear(config_path)

        LOGGER.info("Logger settings saved to %s", config_path)
        return True
    except OSError as e:
        LOGGER.error("Failed to save logger settings: %s", e)
        raise ConfigSaveError(f"Failed to save logger settings: {e}") from e


def open_log_file(filename: Union[str, Path]) -> TextIO:
    """
    Open a log file for appending, creating it if missing

    Raises:
        LogFileError: when the file cannot be opened or created
    """
    try:
        # line buffered
        return open(filename, "a", encoding="utf-8", buffering=1)
    except OSError as e:
        raise LogFileError(f"Cannot open log file {filename}: {e}") from e
