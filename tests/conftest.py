import pytest

from thinfilmcalc import CalculatorSession, FilmLibrary, ThinFilm
from thinfilmcalc.config import Settings

from .utils import ScriptedInput


@pytest.fixture
def sio2():
    return ThinFilm("SiO2", 1.46)


@pytest.fixture
def si3n4():
    return ThinFilm("Si3N4", 2.05)


@pytest.fixture
def library_file(tmp_path):
    path = tmp_path / "films.txt"
    path.write_text("SiO2\n1.46\nSi3N4\n2.05\n", encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path, library_file):
    return Settings(library_path=library_file, log_path=tmp_path / "data.txt")


@pytest.fixture
def library(library_file):
    return FilmLibrary.load(library_file)


@pytest.fixture
def make_session(library, settings):
    """Build a session over the two-film library fed by scripted answers."""

    def _make(answers, lib=None):
        scripted = ScriptedInput(answers)
        session = CalculatorSession(
            library if lib is None else lib, settings, input_func=scripted
        )
        return session, scripted

    return _make
