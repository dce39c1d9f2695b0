"""Errors Module

Exception and warning types raised by the thin film calculator.
"""

from __future__ import annotations


class ThinFilmCalcError(Exception):
    """Base class for all calculator errors."""


class LibraryError(ThinFilmCalcError):
    """Base class for errors raised while reading or writing library files."""


class LibraryFileError(LibraryError):
    """A library or measurement file could not be opened.

    Args:
        path (str): The file that failed to open.
        mode (str): Human readable access mode, e.g. ``"reading"``.
        cause (OSError, optional): The underlying operating system error.
    """

    def __init__(self, path: str, mode: str, cause: OSError | None = None):
        self.path = str(path)
        self.mode = mode
        self.cause = cause
        message = f"File {self.path} failed to open for {mode}"
        if cause is not None and cause.strerror:
            message += f": {cause.strerror}"
        super().__init__(message + ".")


class LibraryFormatError(LibraryError):
    """The library file contains a record that cannot be parsed."""

    def __init__(self, path: str, line_number: int, text: str):
        self.path = str(path)
        self.line_number = line_number
        self.text = text
        super().__init__(
            f"File {self.path}, line {line_number}: "
            f"expected a refractive index, got {text!r}."
        )


class LibraryDecodeError(LibraryError):
    """A library or measurement file is not valid UTF-8 text."""

    def __init__(self, path: str, cause: UnicodeDecodeError):
        self.path = str(path)
        self.cause = cause
        super().__init__(
            f"File {self.path} is not valid UTF-8 text "
            f"(byte offset {cause.start}: {cause.reason})."
        )


class PositionError(ThinFilmCalcError, IndexError):
    """A 1-based library position lies outside the library."""

    def __init__(self, position: int, size: int):
        self.position = position
        self.size = size
        if size == 0:
            message = "The thin film library is empty."
        else:
            message = f"Position {position} is out of range (1-{size})."
        super().__init__(message)


class UndefinedThicknessWarning(RuntimeWarning):
    """Thickness requested for a refractive index below 1."""
