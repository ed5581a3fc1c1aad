import logging

from checkerboard.constants import LOG_LEVEL_ENV
from main import log_level, main


def test_demo_prints_boards_and_changes(capsys):
    main()
    out = capsys.readouterr().out
    assert out.startswith("·A·A·A·A\n")
    assert "(3, 2): A -> B" in out
    assert "(1, 2): A -> B" in out
    assert "·B·B·A·A\n" in out


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert log_level() == logging.DEBUG
    monkeypatch.delenv(LOG_LEVEL_ENV)
    assert log_level() == logging.WARNING


def test_unknown_log_level_falls_back_to_warning(monkeypatch, capsys):
    monkeypatch.setenv(LOG_LEVEL_ENV, "verbose")
    assert log_level() == logging.WARNING
    main()
    assert "·A·A·A·A" in capsys.readouterr().out
