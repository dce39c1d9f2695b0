"""
Configuration
=============
Default file locations and the settings object handed to the session.

Exports:
    DEFAULT_LIBRARY_PATH (str): Material library file, relative to the
        working directory.
    DEFAULT_LOG_PATH (str): Measurement log file, relative to the working
        directory.
    Settings: Resolved run configuration.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from .formatting import ColumnWidths, DEFAULT_WIDTHS

DEFAULT_LIBRARY_PATH: str = "films.txt"
DEFAULT_LOG_PATH: str = "data.txt"


@dataclass(frozen=True)
class Settings:
    """Run configuration for one calculator session."""
    library_path: Path = Path(DEFAULT_LIBRARY_PATH)
    log_path: Path = Path(DEFAULT_LOG_PATH)
    widths: ColumnWidths = field(default_factory=lambda: DEFAULT_WIDTHS)
    log_level: int = logging.WARNING
    debug_log: Optional[Path] = None

    def with_overrides(self, **changes) -> Settings:
        """Copy with the given non-None fields replaced; paths are coerced."""
        changes = {k: v for k, v in changes.items() if v is not None}
        for key in ("library_path", "log_path", "debug_log"):
            if key in changes:
                changes[key] = Path(changes[key])
        return replace(self, **changes)
