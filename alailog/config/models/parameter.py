"""Logger Configuration Classes"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from alailog.color import Color
from alailog.level import Level


DEFAULT_FILE = "logs.txt"
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LoggerConfig(BaseModel):
    """Resolved configuration a Logger is built from"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    file: Optional[Any] = Field(default=None, description="Writable text stream, None for no file sink")
    level: Level = Field(default=Level.INFO, description="Minimum level of the plain-mode filter")
    stdout: bool = Field(default=True, description="Whether to write to standard output")
    stderr: bool = Field(default=False, description="Whether to write to standard error")
    color: bool = Field(default=False, description="Whether to wrap messages in color escapes")
    text_color: Color = Field(default=Color.WHITE, description="Foreground color token")
    bg_color: Color = Field(default=Color.BG_BLACK, description="Background color token")
    timestamps: bool = Field(default=False, description="Whether to prefix a timestamp")
    timestamp_format: str = Field(
        default="", description=f"strftime pattern, {DEFAULT_TIMESTAMP_FORMAT!r} when empty"
    )

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Level:
        return Level.parse(value)

    @field_validator("text_color", "bg_color", mode="before")
    @classmethod
    def _parse_color(cls, value: Any) -> Color:
        return Color.parse(value)

    @field_validator("file")
    @classmethod
    def _validate_file(cls, value: Any) -> Any:
        if value is not None and not callable(getattr(value, "write", None)):
            raise ValueError("file must be a writable stream")
        return value


class Parameter(BaseModel):
    """
    Serializable logger settings, keyed by file name instead of a handle.

    This is what the shared logger is initialized from, and what
    load_parameter / save_parameter read and write as JSON.
    """

    model_config = ConfigDict(frozen=True)

    filename: str = Field(default=DEFAULT_FILE, min_length=1, description="Log file path")
    level: Level = Field(default=Level.INFO, description="Minimum level of the plain-mode filter")
    stdout: bool = Field(default=True, description="Whether to write to standard output")
    stderr: bool = Field(default=False, description="Whether to write to standard error")
    is_colored: bool = Field(default=False, description="Whether to wrap messages in color escapes")
    text_color: Color = Field(default=Color.WHITE, description="Foreground color token")
    bg_color: Color = Field(default=Color.BG_BLACK, description="Background color token")
    timestamps: bool = Field(default=True, description="Whether to prefix a timestamp")
    timestamp_format: str = Field(default="%Y/%m/%d %H:%M:%S", description="strftime pattern")

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Level:
        return Level.parse(value)

    @field_validator("text_color", "bg_color", mode="before")
    @classmethod
    def _parse_color(cls, value: Any) -> Color:
        return Color.parse(value)

    @field_serializer("level")
    def _dump_level(self, value: Level) -> str:
        return value.name.lower()

    @field_serializer("text_color", "bg_color")
    def _dump_color(self, value: Color) -> str:
        return value.name.lower()

    def to_config(self, file: Optional[Any]) -> LoggerConfig:
        """Combine these settings with an already opened file"""
        return LoggerConfig(
            file=file,
            level=self.level,
            stdout=self.stdout,
            stderr=self.stderr,
            color=self.is_colored,
            text_color=self.text_color,
            bg_color=self.bg_color,
            timestamps=self.timestamps,
            timestamp_format=self.timestamp_format,
        )


def default_parameter() -> Parameter:
    """Settings used when the shared logger is first requested without any"""
    return Parameter()
