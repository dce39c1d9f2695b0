"""Formatting Module

Fixed-width text rendering for the console tables and the measurement log.
Column widths are carried by a ``ColumnWidths`` instance passed to every
routine; ``DEFAULT_WIDTHS`` holds the standard layout.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .film import ThinFilm

UNDEFINED = "n/a"


@dataclass(frozen=True)
class ColumnWidths:
    """Column widths of the fixed-width tables.

    Attributes:
        material (int): Width of the left-aligned material name column.
        index (int): Width of the refractive index column.
        maxima (int): Width of the fringe count column. The measurement log
            reuses it for the thickness column.
        thickness (int): Width of the thickness column in result tables.
    """

    material: int = 30
    index: int = 10
    maxima: int = 15
    thickness: int = 20

    def __post_init__(self):
        for name in ("material", "index", "maxima", "thickness"):
            if getattr(self, name) < 1:
                raise ValueError(f"column width '{name}' must be positive")


DEFAULT_WIDTHS = ColumnWidths()


def _number(value: float, width: int, precision: int) -> str:
    if math.isnan(value):
        return f"{UNDEFINED:>{width}}"
    return f"{value:>{width}.{precision}f}"


def result_header(widths: ColumnWidths | None = None) -> str:
    w = widths or DEFAULT_WIDTHS
    return (
        f"{'Material':<{w.material}}"
        f"{'Index':>{w.index}}"
        f"{'# of maxima':>{w.maxima}}"
        f"{'Thickness (nm)':>{w.thickness}}"
    )


def format_result_row(film: ThinFilm, widths: ColumnWidths | None = None) -> str:
    w = widths or DEFAULT_WIDTHS
    return (
        f"{film.name:<{w.material}}"
        f"{_number(film.index, w.index, 2)}"
        f"{_number(film.fringe_count, w.maxima, 2)}"
        f"{_number(film.thickness, w.thickness, 1)}"
    )


def material_header(widths: ColumnWidths | None = None) -> str:
    w = widths or DEFAULT_WIDTHS
    return f"{'Material':<{w.material}}{'Index':>{w.index}}"


def format_library_row(film: ThinFilm, widths: ColumnWidths | None = None) -> str:
    w = widths or DEFAULT_WIDTHS
    return f"{film.name:<{w.material}}{_number(film.index, w.index, 2)}"


def library_table(
    films: Iterable[ThinFilm], widths: ColumnWidths | None = None
) -> list[str]:
    """Lines of the numbered library listing.

    The index header is shifted right by the width of the position prefix
    (two digits and a space) plus one column.
    """
    w = widths or DEFAULT_WIDTHS
    lines = [
        "THIN FILM LIBRARY",
        f"{'Material':<{w.material}}{'Index':>{w.index + 4}}",
    ]
    for position, film in enumerate(films, start=1):
        lines.append(f"{position:>2} {format_library_row(film, w)}")
    return lines


def format_measurement_row(
    name: str, index: float, thickness: float, widths: ColumnWidths | None = None
) -> str:
    """One measurement log line: name, index and thickness."""
    w = widths or DEFAULT_WIDTHS
    return (
        f"{name:<{w.material}}"
        f"{_number(index, w.index, 2)}"
        f"{_number(thickness, w.maxima, 1)}"
    )


def format_measurement_line(
    film: ThinFilm, widths: ColumnWidths | None = None
) -> str:
    return format_measurement_row(film.name, film.index, film.thickness, widths)


def measurement_header(widths: ColumnWidths | None = None) -> str:
    w = widths or DEFAULT_WIDTHS
    return (
        f"{'Material':<{w.material}}"
        f"{'Index':>{w.index}}"
        f"{'Thickness (nm)':>{w.maxima}}"
    )


def parse_number(text: str) -> float:
    """Inverse of the number columns: ``n/a`` reads back as NaN."""
    text = text.strip()
    if text == UNDEFINED:
        return math.nan
    return float(text)
