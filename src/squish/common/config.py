"""Process-wide configuration for squish."""

import os
from typing import ClassVar, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

LOG_LEVEL_ENV_VAR = "SQUISH_LOG_LEVEL"

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class SquishConfig(BaseModel):
    """Immutable limits and defaults threaded through the pipeline.

    Attributes:
        max_file_len_bytes: Largest input file that will be read
        resize_width_lower_threshold: Smallest accepted target width
        resize_ratio_upper_threshold: Largest accepted target/current width ratio
        default_resize_width: Target width when none is given
        clipboard_sentinel: Input descriptor meaning "read from the clipboard"
        log_level: Level of the stderr diagnostics sink
    """

    max_file_len_bytes: int = Field(default=100_000_000, gt=0)
    resize_width_lower_threshold: int = Field(default=20, ge=1)
    resize_ratio_upper_threshold: float = Field(default=3.0, gt=0)
    default_resize_width: int = Field(default=800, ge=1)
    clipboard_sentinel: str = "cb"
    log_level: LogLevel = "WARNING"

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_env(cls) -> "SquishConfig":
        """Build the config, taking the log level from SQUISH_LOG_LEVEL if valid."""
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "").upper()
        if level not in get_args(LogLevel):
            return cls()
        return cls(log_level=level)  # pyright: ignore[reportArgumentType]


DEFAULT_CONFIG = SquishConfig()
