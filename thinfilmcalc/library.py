"""Film Library Management

Persistence of the thin film library and of the measurement log.

The library file holds two lines per material, the name and then the
refractive index; file order is library order. The measurement log is an
append-only fixed-width text file, one line per saved measurement.
"""

from __future__ import annotations

import logging
import math
import os
import stat
import tempfile
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .errors import (
    LibraryDecodeError,
    LibraryFileError,
    LibraryFormatError,
    PositionError,
)
from .film import ThinFilm
from .formatting import ColumnWidths, format_measurement_line, parse_number

logger = logging.getLogger(__name__)


def format_index(index: float) -> str:
    """Shortest decimal text that reads back as the same index."""
    return np.format_float_positional(index, trim="-")


def _open(path: str | os.PathLike, mode: str, action: str):
    try:
        return open(path, mode, encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not open '{path}' for {action}: {e}")
        raise LibraryFileError(path, action, e) from e


def _missing_final_newline(path: str | os.PathLike) -> bool:
    try:
        with open(path, "rb") as f:
            if f.seek(0, os.SEEK_END) == 0:
                return False
            f.seek(-1, os.SEEK_END)
            return f.read(1) != b"\n"
    except OSError:
        return False


class FilmLibrary:
    """Ordered, file-backed collection of thin film materials.

    Positions exposed to users are 1-based; ``films`` is the underlying list.

    Args:
        films (Iterable[ThinFilm], optional): Initial materials, in order.
        path (str | os.PathLike, optional): Library file used by ``save`` and
            ``append`` when no explicit path is given.
    """

    def __init__(
        self,
        films: Iterable[ThinFilm] = (),
        path: str | os.PathLike | None = None,
    ):
        self.films: list[ThinFilm] = list(films)
        self.path = Path(path) if path is not None else None

    @classmethod
    def load(cls, path: str | os.PathLike) -> FilmLibrary:
        """Read a library file.

        Blank lines between records are ignored. A trailing name without an
        index line is dropped.

        Raises:
            LibraryFileError: If the file cannot be opened.
            LibraryFormatError: If an index line is not a finite number.
            LibraryDecodeError: If the file is not valid UTF-8.
        """
        logger.info(f"Loading film library from: {path}")
        films = []
        name = None
        try:
            with _open(path, "r", "reading") as f:
                for line_number, line in enumerate(f, start=1):
                    text = line.strip()
                    if not text:
                        continue
                    if name is None:
                        name = text
                        continue
                    try:
                        index = float(text)
                    except ValueError:
                        index = math.nan
                    if not math.isfinite(index):
                        logger.error(f"Bad index on line {line_number} of '{path}'")
                        raise LibraryFormatError(path, line_number, text)
                    films.append(ThinFilm(name, index))
                    name = None
        except UnicodeDecodeError as e:
            logger.error(f"'{path}' is not valid UTF-8: {e}")
            raise LibraryDecodeError(path, e) from e

        if name is not None:
            logger.debug(f"Dropped incomplete record {name!r} at end of '{path}'")
        logger.debug(f"Loaded {len(films)} films.")
        return cls(films, path)

    def _resolve(self, path: str | os.PathLike | None) -> Path:
        if path is not None:
            return Path(path)
        if self.path is None:
            raise ValueError("No library path given and none set on the library.")
        return self.path

    def save(self, path: str | os.PathLike | None = None) -> None:
        """Rewrite the whole library file from the in-memory list.

        The new content is written to a temporary file next to the target
        and moved into place, so the file is never left half written.
        """
        target = self._resolve(path)
        logger.info(f"Saving {len(self.films)} films to: {target}")
        try:
            fd, temp_path = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
        except OSError as e:
            logger.error(f"Could not open '{target}' for writing: {e}")
            raise LibraryFileError(target, "writing", e) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for film in self.films:
                    f.write(f"{film.name}\n{format_index(film.index)}\n")
            if target.exists():
                os.chmod(temp_path, stat.S_IMODE(target.stat().st_mode))
            os.replace(temp_path, target)
        except OSError as e:
            logger.error(f"Could not write '{target}': {e}")
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise LibraryFileError(target, "writing", e) from e

    def append(self, film: ThinFilm, path: str | os.PathLike | None = None) -> None:
        """Add a material to the end of the library and of the library file.

        Only the name and index are kept; measurement fields are dropped.
        """
        target = self._resolve(path)
        entry = ThinFilm(film.name, film.index)
        lead = "\n" if _missing_final_newline(target) else ""
        with _open(target, "a", "appending") as f:
            f.write(lead)
            f.write(f"{entry.name}\n{format_index(entry.index)}\n")
        self.films.append(entry)
        logger.info(f"Added '{entry.name}' to library at position {len(self.films)}")

    def _check(self, position: int) -> int:
        if not 1 <= position <= len(self.films):
            raise PositionError(position, len(self.films))
        return position - 1

    def get(self, position: int) -> ThinFilm:
        """Material at a 1-based position."""
        return self.films[self._check(position)]

    def remove(self, position: int) -> ThinFilm:
        """Remove the material at a 1-based position, shifting later ones left.

        The file is not touched; call ``save`` to persist the removal.
        """
        removed = self.films.pop(self._check(position))
        logger.info(f"Removed '{removed.name}' from library position {position}")
        return removed

    def __len__(self):
        return len(self.films)

    def __iter__(self) -> Iterator[ThinFilm]:
        return iter(self.films)

    def __getitem__(self, i):
        return self.films[i]

    def __repr__(self):
        return f"FilmLibrary({len(self.films)} films, path={str(self.path)!r})"


@dataclass
class MeasurementEntry:
    """One line of the measurement log."""

    name: str
    index: float
    thickness: float


def append_measurement(
    path: str | os.PathLike, film: ThinFilm, widths: ColumnWidths | None = None
) -> str:
    """Append a measurement line for ``film`` to the log and return it."""
    line = format_measurement_line(film, widths)
    lead = "\n" if _missing_final_newline(path) else ""
    with _open(path, "a", "appending") as f:
        f.write(lead + line + "\n")
    logger.info(f"Measurement for '{film.name}' saved to: {path}")
    return line


def read_measurements(path: str | os.PathLike) -> list[MeasurementEntry]:
    """Parse a measurement log.

    The name column may overflow its width, so each line is split from the
    right: the last two fields are the index and the thickness.
    Unparseable lines are skipped.

    Raises:
        LibraryFileError: If the log cannot be opened.
        LibraryDecodeError: If the log is not valid UTF-8.
    """
    entries = []
    try:
        with _open(path, "r", "reading") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                fields = line.rstrip().rsplit(None, 2)
                try:
                    name, index, thickness = fields
                    entries.append(
                        MeasurementEntry(
                            name, parse_number(index), parse_number(thickness)
                        )
                    )
                except ValueError:
                    logger.warning(
                        f"Skipping unreadable line {line_number} of '{path}'"
                    )
    except UnicodeDecodeError as e:
        logger.error(f"'{path}' is not valid UTF-8: {e}")
        raise LibraryDecodeError(path, e) from e
    return entries
