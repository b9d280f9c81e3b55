from __future__ import annotations

"""
Logging Settings.

Turns the validated application configuration into the immutable
settings consumed by configure_logging(), and maps textual severities.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Terminal output stays terse; the file carries timestamps and logger names
CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings applied by configure_logging().

    Attributes:
        level: Textual severity threshold ("DEBUG", "INFO", ...).
        console: Whether records go to stderr.
        log_file: Rotating log file, None to keep logs in the terminal only.
        max_bytes: Rotation size of the log file.
        backup_count: Rotated files kept next to the active one.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    @property
    def level_value(self) -> int:
        return parse_level(self.level)

    @classmethod
    def from_app_config(cls, config: Dict[str, Any], *, console: bool = True) -> LoggingConfig:
        """
        Build logging settings from a validated analysis configuration.

        Args:
            config: Output of validate_config(); reads 'log_level' and 'log_file'.
            console: Whether to keep the stderr handler.

        Returns:
            LoggingConfig: Settings where an empty 'log_file' disables file output.
        """
        return cls(
            level=str(config.get("log_level") or "INFO"),
            console=console,
            log_file=config.get("log_file") or None,
        )


def parse_level(level: Optional[str]) -> int:
    """Convert a textual level to its numeric constant, INFO when unknown."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)
