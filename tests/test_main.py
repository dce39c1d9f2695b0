import logging

import pytest

from thinfilmcalc.__main__ import build_parser, main
from thinfilmcalc.config import Settings
from thinfilmcalc.logging_config import LOGGER_NAME, setup_logging

from .utils import ScriptedInput


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.library is None
        assert args.log is None
        assert not args.verbose
        assert args.debug_log is None

    def test_settings_overrides(self, tmp_path):
        settings = Settings().with_overrides(
            library_path=str(tmp_path / "lib.txt"), log_path=None
        )
        assert settings.library_path == tmp_path / "lib.txt"
        assert str(settings.log_path) == "data.txt"


class TestMain:
    def test_missing_library_exits_non_zero(self, tmp_path, capsys):
        status = main(["--library", str(tmp_path / "missing.txt")])
        assert status == 1
        assert "failed to open for reading" in capsys.readouterr().out

    def test_malformed_library_exits_non_zero(self, tmp_path, capsys):
        path = tmp_path / "films.txt"
        path.write_text("SiO2\nabout 1.5\n")
        assert main(["--library", str(path)]) == 1
        assert "line 2" in capsys.readouterr().out

    def test_invalid_utf8_library_exits_non_zero(self, tmp_path, capsys):
        path = tmp_path / "films.txt"
        path.write_bytes(b"Ta\xb2O5\n2.1\n")
        assert main(["--library", str(path)]) == 1
        assert "not valid UTF-8" in capsys.readouterr().out

    def test_unopenable_log_during_session_exits_non_zero(
        self, library_file, tmp_path, monkeypatch, capsys
    ):
        answers = ["1", "y", "1", "100", "2", "y", "n", "0"]
        monkeypatch.setattr("builtins.input", ScriptedInput(answers))
        status = main(["--library", str(library_file), "--log", str(tmp_path)])
        assert status == 1
        out = capsys.readouterr().out
        assert "failed to open for appending" in out
        assert "Goodbye!" not in out

    def test_session_runs(self, library_file, tmp_path, monkeypatch, capsys):
        log = tmp_path / "data.txt"
        answers = ["1", "y", "1", "100", "2", "y", "n", "0"]
        monkeypatch.setattr("builtins.input", ScriptedInput(answers))
        status = main(["--library", str(library_file), "--log", str(log)])
        assert status == 0
        assert "Goodbye!" in capsys.readouterr().out
        assert log.read_text().startswith("SiO2")

    def test_default_paths_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "films.txt").write_text("SiO2\n1.46\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("builtins.input", ScriptedInput(["3", "TiO2", "2.4", "y", "0"]))
        assert main([]) == 0
        assert (tmp_path / "films.txt").read_text() == "SiO2\n1.46\nTiO2\n2.4\n"

    def test_debug_log_written(self, library_file, tmp_path, monkeypatch):
        debug_log = tmp_path / "debug.log"
        monkeypatch.setattr("builtins.input", ScriptedInput(["0"]))
        main(["--library", str(library_file), "--debug-log", str(debug_log)])
        assert "Loading film library" in debug_log.read_text()


class TestLogging:
    def test_console_handler_on_stderr(self, capsys):
        setup_logging(logging.INFO)
        logging.getLogger("thinfilmcalc.library").info("hello")
        captured = capsys.readouterr()
        assert "hello" in captured.err
        assert "hello" not in captured.out

    def test_repeated_setup_does_not_duplicate(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1
