"""Thickness core functions.

Single-layer film thickness from the number of interference maxima counted
over a spectral bandwidth, assuming normal incidence on a silicon substrate:

    d = m * Δλ / 2 * sqrt(n² - 1)

where ``d`` is the film thickness in nm, ``m`` the number of maxima, ``Δλ``
the spectral bandwidth in nm and ``n`` the real part of the refractive index.
"""

from __future__ import annotations

import warnings
from typing import Any, TypeAlias

import numpy as np

from .errors import UndefinedThicknessWarning

Array: TypeAlias = Any  # np.ndarray


def fringe_thickness(
    index: float | Array,
    spectral_range_nm: float | Array,
    fringe_count: float | Array,
) -> float | Array:
    """Film thickness in nm from a fringe count.

    Inputs broadcast against each other; scalar inputs give a ``float``.
    An index below 1 has no real solution: the thickness is NaN and an
    ``UndefinedThicknessWarning`` is emitted.

    Args:
        index: Real part of the refractive index of the film.
        spectral_range_nm: Spectral bandwidth over which maxima were counted,
            in nm.
        fringe_count: Number of maxima within the spectral bandwidth.

    Returns:
        Thickness in nm, NaN where ``index < 1``.
    """
    n = np.asarray(index, dtype=np.float64)
    span = np.asarray(spectral_range_nm, dtype=np.float64)
    m = np.asarray(fringe_count, dtype=np.float64)

    below_unity = n < 1.0
    if np.any(below_unity):
        warnings.warn(
            "thickness is undefined for a refractive index below 1",
            UndefinedThicknessWarning,
            stacklevel=2,
        )

    radicand = np.where(below_unity, np.nan, n * n - 1.0)
    thickness = m * span / 2.0 * np.sqrt(radicand)

    if np.ndim(thickness) == 0:
        return float(thickness)
    return thickness
