import math

import pytest

from thinfilmcalc import ThinFilm
from thinfilmcalc.errors import UndefinedThicknessWarning
from thinfilmcalc.formatting import ColumnWidths


class TestThinFilm:
    def test_defaults(self):
        film = ThinFilm()
        assert film.name == ""
        assert film.index == 0.0
        assert film.spectral_range == 0.0
        assert film.fringe_count == 0.0

    def test_creation(self):
        film = ThinFilm("Si3N4", 2.05, spectral_range=50.0, fringe_count=3)
        assert film.name == "Si3N4"
        assert film.index == 2.05
        assert film.spectral_range == 50.0
        assert film.fringe_count == 3.0

    def test_thickness(self):
        film = ThinFilm("Si3N4", 2.05, spectral_range=50.0, fringe_count=3)
        assert film.thickness == pytest.approx(3 * 50 / 2 * math.sqrt(2.05**2 - 1))

    def test_thickness_follows_setters(self, sio2):
        sio2.spectral_range = 200.0
        sio2.fringe_count = 4
        assert sio2.thickness == pytest.approx(400.0 * math.sqrt(1.46**2 - 1))

    def test_thickness_undefined_below_unit_index(self):
        film = ThinFilm("odd", 0.8, 100.0, 1.0)
        with pytest.warns(UndefinedThicknessWarning):
            assert math.isnan(film.thickness)

    def test_repr(self, sio2):
        assert repr(sio2) == "ThinFilm(name='SiO2', index=1.46)"


class TestClamping:
    @pytest.mark.parametrize("field", ["index", "spectral_range", "fringe_count"])
    def test_negative_setter_stores_zero(self, field):
        film = ThinFilm("x", 1.5, 10.0, 2.0)
        setattr(film, field, -3.2)
        assert getattr(film, field) == 0.0

    def test_negative_constructor_values_store_zero(self):
        film = ThinFilm("x", -1.0, -50.0, -2.0)
        assert (film.index, film.spectral_range, film.fringe_count) == (0.0, 0.0, 0.0)

    @pytest.mark.parametrize("field", ["index", "spectral_range", "fringe_count"])
    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_values_rejected(self, field, value):
        film = ThinFilm("x", 1.5, 10.0, 2.0)
        with pytest.raises(ValueError, match="finite"):
            setattr(film, field, value)
        assert getattr(film, field) in (1.5, 10.0, 2.0)

    def test_non_finite_constructor_rejected(self):
        with pytest.raises(ValueError, match="finite"):
            ThinFilm("x", math.nan)

    def test_non_negative_values_kept(self):
        film = ThinFilm("x")
        film.index = 0.0
        film.fringe_count = 2.5
        assert film.index == 0.0
        assert film.fringe_count == 2.5


class TestCopyAndSerialization:
    def test_copy_is_independent(self, si3n4):
        clone = si3n4.copy()
        clone.spectral_range = 50.0
        clone.name = "changed"
        assert si3n4.spectral_range == 0.0
        assert si3n4.name == "Si3N4"

    def test_copy_equal(self, si3n4):
        assert si3n4.copy() == si3n4

    def test_to_dict(self, sio2):
        assert sio2.to_dict() == {
            "name": "SiO2",
            "index": 1.46,
            "spectral_range": 0.0,
            "fringe_count": 0.0,
        }

    def test_from_dict(self):
        film = ThinFilm.from_dict({"name": "TiO2", "index": 2.4, "fringe_count": -1})
        assert film == ThinFilm("TiO2", 2.4)

    def test_from_dict_missing_keys(self):
        with pytest.raises(ValueError, match="must contain"):
            ThinFilm.from_dict({"name": "TiO2"})


class TestRendering:
    def test_format_result(self):
        film = ThinFilm("Si3N4", 2.05, 50.0, 3.0)
        assert film.format_result() == (
            f"{'Si3N4':<30}{'2.05':>10}{'3.00':>15}{'134.2':>20}"
        )

    def test_format_library(self, sio2):
        assert sio2.format_library() == f"{'SiO2':<30}{'1.46':>10}"

    def test_custom_widths(self, sio2):
        widths = ColumnWidths(material=8, index=6)
        assert sio2.format_library(widths) == "SiO2      1.46"
