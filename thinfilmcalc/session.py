"""Interactive Session

Menu-driven console front end of the thin film calculator. The session owns
the in-memory film library for its lifetime and persists changes through
``thinfilmcalc.library``.
"""

from __future__ import annotations

import logging
import math
import sys
import warnings
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from .config import Settings
from .errors import LibraryDecodeError, UndefinedThicknessWarning
from .film import ThinFilm
from .formatting import (
    format_measurement_row,
    format_result_row,
    library_table,
    material_header,
    measurement_header,
    result_header,
)
from .library import FilmLibrary, append_measurement, read_measurements

logger = logging.getLogger(__name__)

# menu items
EXIT = 0
CAL_THICKNESS = 1
MATERIAL_LIST = 2
ADD_MATERIAL = 3
DEL_MATERIAL = 4
SHOW_MEASUREMENTS = 5

MENU = (
    "\nPlease choose one of the following operations: \n"
    f"{EXIT}. Exit the program\n"
    f"{CAL_THICKNESS}. Calculate thickness of arbitrary film\n"
    f"{MATERIAL_LIST}. List the materials in the thin film library\n"
    f"{ADD_MATERIAL}. Add a new thin film to the library\n"
    f"{DEL_MATERIAL}. Delete a thin film from the library\n"
    f"{SHOW_MEASUREMENTS}. Show saved measurement results"
)

NAME_PROMPT = "Enter the name of the film: "
INDEX_PROMPT = "Enter the refractive index of the film: "
RANGE_PROMPT = (
    "Enter the spectral bandwidth over which the spectra was acquired in nm: "
)
MAXIMA_PROMPT = "Enter the number of maxima within the spectral range: "
POSITION_PROMPT = "Enter the number preceding the name of the thin film material: "
SAVE_MATERIAL_PROMPT = "Save material and index of this film (y/n)? "
SAVE_MEASUREMENT_PROMPT = "Would you like to save this measurement result (y/n)? "
EMPTY_LIBRARY = "The thin film library is empty."


class CalculatorSession:
    """Console session over a film library.

    Args:
        library (FilmLibrary): Library loaded at startup.
        settings (Settings, optional): File locations and column widths.
        input_func (Callable[[str], str], optional): Reads one line of user
            input after showing a prompt. Defaults to ``input``.
        stream (TextIO, optional): Output stream. Defaults to ``sys.stdout``.
    """

    def __init__(
        self,
        library: FilmLibrary,
        settings: Settings | None = None,
        input_func: Callable[[str], str] | None = None,
        stream: TextIO | None = None,
    ):
        self.library = library
        self.settings = settings or Settings()
        self.input_func = input_func or input
        self.stream = stream
        self._actions = {
            CAL_THICKNESS: self.calculate_thickness,
            MATERIAL_LIST: self.list_films,
            ADD_MATERIAL: self.add_material,
            DEL_MATERIAL: self.delete_film,
            SHOW_MEASUREMENTS: self.show_measurements,
        }

    # ----- console helpers -----
    def _say(self, text: str = "") -> None:
        print(text, file=self.stream or sys.stdout)

    def _read(self, prompt: str) -> str:
        return self.input_func(prompt).strip()

    def ask_text(self, prompt: str) -> str:
        while True:
            text = self._read(prompt)
            if text:
                return text
            self._say("Please enter a name.")

    def ask_number(self, prompt: str) -> float:
        """Read a real number, repeating the prompt until one is given."""
        while True:
            text = self._read(prompt)
            try:
                value = float(text)
            except ValueError:
                self._say(f"'{text}' is not a number, please try again.")
                continue
            if math.isfinite(value):
                return value
            self._say("Please enter a finite number.")

    def ask_yes_no(self, prompt: str) -> bool:
        while True:
            answer = self._read(prompt).lower()
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self._say("Please answer y or n.")

    def ask_position(self) -> int | None:
        """List the library and read a valid 1-based position.

        Returns:
            The position, or None if the library is empty.
        """
        if not self.library:
            self._say(EMPTY_LIBRARY)
            return None
        self.list_films()
        size = len(self.library)
        while True:
            text = self._read(POSITION_PROMPT)
            try:
                position = int(text)
            except ValueError:
                position = None
            if position is not None and 1 <= position <= size:
                return position
            self._say(f"Please enter a number from 1 to {size}.")

    def show_result(self, film: ThinFilm) -> None:
        """Print the result table for one measured film."""
        w = self.settings.widths
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UndefinedThicknessWarning)
            row = format_result_row(film, w)
            thickness = film.thickness
        self._say()
        self._say(result_header(w))
        self._say(row)
        if math.isnan(thickness):
            self._say("Thickness is undefined for a refractive index below 1.")

    def offer_measurement_save(self, film: ThinFilm) -> None:
        if self.ask_yes_no(SAVE_MEASUREMENT_PROMPT):
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", UndefinedThicknessWarning)
                append_measurement(self.settings.log_path, film, self.settings.widths)

    # ----- menu loop -----
    def run(self) -> int:
        """Run the menu loop until the user exits or input ends.

        Returns:
            Process exit status, 0 on a normal exit.
        """
        self._say()
        self._say("Thin Film Calculator")
        try:
            while True:
                self._say(MENU)
                text = self._read("Choice (0-5): ")
                try:
                    choice = int(text)
                except ValueError:
                    choice = None
                if choice == EXIT:
                    break
                action = self._actions.get(choice)
                if action is None:
                    self._say(f"'{text}' is not a menu option, please choose 0-5.")
                    continue
                logger.debug(f"Menu choice {choice}")
                action()
        except EOFError:
            logger.debug("End of input, leaving session.")
        self._say("\nGoodbye!")
        return 0

    # ----- operations -----
    def calculate_thickness(self) -> None:
        """Calculate thicknesses until the user declines another film."""
        while True:
            if self.ask_yes_no("Read material data from library? (y/n): "):
                self._calculate_from_library()
            else:
                self._calculate_unknown()
            if not self.ask_yes_no("Enter another thin film? (y/n): "):
                return

    def _calculate_from_library(self) -> None:
        position = self.ask_position()
        if position is None:
            return
        film = self.library.get(position).copy()
        film.spectral_range = self.ask_number(RANGE_PROMPT)
        film.fringe_count = self.ask_number(MAXIMA_PROMPT)
        self.show_result(film)
        self.offer_measurement_save(film)

    def _calculate_unknown(self) -> None:
        film = ThinFilm()
        film.name = self.ask_text(NAME_PROMPT)
        film.index = self.ask_number(INDEX_PROMPT)
        film.spectral_range = self.ask_number(RANGE_PROMPT)
        film.fringe_count = self.ask_number(MAXIMA_PROMPT)
        self.show_result(film)
        if self.ask_yes_no(SAVE_MATERIAL_PROMPT):
            self.library.append(film, self.settings.library_path)
        self.offer_measurement_save(film)

    def list_films(self) -> None:
        self._say()
        for line in library_table(self.library, self.settings.widths):
            self._say(line)

    def add_material(self) -> None:
        film = ThinFilm()
        film.name = self.ask_text(NAME_PROMPT)
        film.index = self.ask_number(INDEX_PROMPT)
        self._say()
        self._say(material_header(self.settings.widths))
        self._say(film.format_library(self.settings.widths))
        self._say()
        if self.ask_yes_no(SAVE_MATERIAL_PROMPT):
            self.library.append(film, self.settings.library_path)
            self._say(f"{film.name} added at position {len(self.library)}.")

    def delete_film(self) -> None:
        position = self.ask_position()
        if position is None:
            return
        removed = self.library.remove(position)
        self.library.save(self.settings.library_path)
        self._say(f"{removed.name} deleted from the library.")

    def show_measurements(self) -> None:
        path = self.settings.log_path
        try:
            entries = read_measurements(path) if Path(path).exists() else []
        except LibraryDecodeError as e:
            self._say(f"Cannot show measurements: {e}")
            return
        if not entries:
            self._say("No measurements saved yet.")
            return
        w = self.settings.widths
        self._say()
        self._say("SAVED MEASUREMENTS")
        self._say(measurement_header(w))
        for entry in entries:
            self._say(
                format_measurement_row(entry.name, entry.index, entry.thickness, w)
            )
