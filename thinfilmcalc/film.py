"""Thin Film Module

Defines the thin film record: a named material with its refractive index,
plus the spectral range and fringe count of one measurement.
"""

from __future__ import annotations

import math
from typing import Any

from .core import fringe_thickness
from .formatting import ColumnWidths, format_library_row, format_result_row


def _clamp(value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"expected a finite number, got {value}")
    return 0.0 if value < 0 else value


class ThinFilm:
    """A thin film material and, optionally, one fringe measurement on it.

    Negative values assigned to ``index``, ``spectral_range`` or
    ``fringe_count`` are stored as 0; NaN and infinite values raise
    ``ValueError``.

    Args:
        name (str): Name of the film material.
        index (float): Real part of the refractive index, typically at
            632.8 nm.
        spectral_range (float): Spectral bandwidth of the measurement in nm.
        fringe_count (float): Number of maxima within the spectral range.

    Examples:
        >>> film = ThinFilm("Si3N4", 2.05, spectral_range=50.0, fringe_count=3)
        >>> round(film.thickness, 1)
        134.2
    """

    def __init__(
        self,
        name: str = "",
        index: float = 0.0,
        spectral_range: float = 0.0,
        fringe_count: float = 0.0,
    ):
        self.name = name
        self.index = index
        self.spectral_range = spectral_range
        self.fringe_count = fringe_count

    @property
    def index(self) -> float:
        return self._index

    @index.setter
    def index(self, value: float):
        self._index = _clamp(value)

    @property
    def spectral_range(self) -> float:
        return self._spectral_range

    @spectral_range.setter
    def spectral_range(self, value: float):
        self._spectral_range = _clamp(value)

    @property
    def fringe_count(self) -> float:
        return self._fringe_count

    @fringe_count.setter
    def fringe_count(self, value: float):
        self._fringe_count = _clamp(value)

    @property
    def thickness(self) -> float:
        """Film thickness in nm, NaN when the index is below 1."""
        return fringe_thickness(self.index, self.spectral_range, self.fringe_count)

    def copy(self) -> ThinFilm:
        """Return an independent copy, measurement fields included."""
        return ThinFilm(self.name, self.index, self.spectral_range, self.fringe_count)

    def format_result(self, widths: ColumnWidths | None = None) -> str:
        """Single result-table row: name, index, fringe count, thickness."""
        return format_result_row(self, widths)

    def format_library(self, widths: ColumnWidths | None = None) -> str:
        """Single library-table row: name and index only."""
        return format_library_row(self, widths)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "index": self.index,
            "spectral_range": self.spectral_range,
            "fringe_count": self.fringe_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ThinFilm:
        if "name" not in data or "index" not in data:
            raise ValueError("Thin film data must contain 'name' and 'index'.")
        return cls(
            data["name"],
            data["index"],
            data.get("spectral_range", 0.0),
            data.get("fringe_count", 0.0),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThinFilm):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"ThinFilm(name={self.name!r}, index={self.index})"
