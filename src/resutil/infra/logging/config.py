from __future__ import annotations

"""
Logging Settings.

The level names accepted on the command line and through RESUTIL_LOG_LEVEL,
and the frozen settings object the logging bootstrap is driven by. A
settings object is normally derived from a validated session configuration.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

LOG_LEVEL_ENV_VAR = "RESUTIL_LOG_LEVEL"

LEVEL_NAMES: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def default_level() -> str:
    """Resolve the default level, honouring RESUTIL_LOG_LEVEL."""
    value = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    return value if value in LEVEL_NAMES else "WARNING"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where diagnostics go and how much of them.

    Attributes:
        level: Minimum severity name, e.g. 'WARNING'.
        console: Whether records are written to stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size at which the log file is rotated.
        backup_count: Rotated log files kept beside the active one.
        console_fmt: Record format on stderr.
        file_fmt: Record format in the log file (timestamped).
    """
    level: str = field(default_factory=default_level)
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 1

    console_fmt: str = "%(levelname)s | %(name)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    @classmethod
    def from_session(cls, conf: Dict[str, Any]) -> LoggingConfig:
        """
        Derive logging settings from a validated session configuration.

        Diagnostics always go to stderr so that stdout only carries listings.
        An empty 'log_file' disables the file sink.
        """
        return cls(
            level=conf.get("log_level") or default_level(),
            console=True,
            log_file=conf.get("log_file") or None,
        )

    @property
    def level_number(self) -> int:
        """Numeric level; unknown names fall back to INFO."""
        return LEVEL_NAMES.get(str(self.level or "").strip().upper(), logging.INFO)
