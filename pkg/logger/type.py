from dataclasses import dataclass

from .constant import *


@dataclass
class LoggerConfig:
    """Logger configuration.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Enable console output
        colorize: Enable colored console output
        service_name: Service name stamped on every record
    """

    level: LogLevel = DEFAULT_LEVEL
    enable_console: bool = DEFAULT_ENABLE_CONSOLE
    colorize: bool = DEFAULT_COLORIZE
    service_name: str = DEFAULT_SERVICE_NAME

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.level, str) and not isinstance(self.level, LogLevel):
            value = self.level.upper()
            if value == "WARN":
                value = LogLevel.WARN.value
            try:
                self.level = LogLevel(value)
            except ValueError:
                valid_levels = [l.value for l in LogLevel]
                raise ValueError(
                    f"Invalid log level: {self.level}. Must be one of {valid_levels}"
                )
        if not self.service_name or not self.service_name.strip():
            raise ValueError("service_name cannot be empty")


__all__ = ["LoggerConfig"]
