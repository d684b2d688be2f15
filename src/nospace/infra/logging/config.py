from __future__ import annotations

"""
Logging Configuration Model.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging bootstrap.

    Attributes:
        level: Minimum severity name (DEBUG, INFO, ...); unknown names mean INFO.
        console: Send records to stderr.
        log_file: Also append records to this file, rotated at max_bytes.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files to keep.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2
