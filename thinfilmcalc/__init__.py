"""Thin film thickness calculator.

Estimates the thickness of a single film on silicon from the number of
interference maxima observed over a spectral bandwidth, using refractive
indices kept in a plain-text material library.

Public API:
- ``ThinFilm``: material record (name, index) with one measurement
- ``fringe_thickness``: thickness in nm from index, bandwidth and fringe count
- ``FilmLibrary``: ordered, file-backed material library
- ``CalculatorSession``: interactive menu loop

Units: spectral range and thickness in nm.
"""

from __future__ import annotations

from .core import fringe_thickness
from .film import ThinFilm
from .formatting import DEFAULT_WIDTHS, ColumnWidths
from .library import FilmLibrary, MeasurementEntry, append_measurement, read_measurements
from .session import CalculatorSession

__version__ = "1.0.1"

__all__ = [
    "CalculatorSession",
    "ColumnWidths",
    "DEFAULT_WIDTHS",
    "FilmLibrary",
    "MeasurementEntry",
    "ThinFilm",
    "append_measurement",
    "fringe_thickness",
    "read_measurements",
]
