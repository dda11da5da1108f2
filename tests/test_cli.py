"""
Tests for the process entry point.
"""

import logging

import pytest

from linopt import __version__
from linopt.cli import main
from linopt.core.config import LOG_LEVEL_ENV
from linopt.core.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestMain:

    def test_exits_zero(self, capsys):
        assert main([]) == 0
        err = capsys.readouterr().err
        assert f"linopt {__version__}" in err
        assert "log level set to" not in err

    def test_debug_flag(self, capsys):
        assert main(["--log-level", "debug"]) == 0
        assert "log level set to DEBUG" in capsys.readouterr().err

    def test_quiet_level(self, capsys):
        assert main(["--log-level", "ERROR"]) == 0
        assert capsys.readouterr().err == ""

    def test_env_level(self, monkeypatch, capsys):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert main([]) == 0
        assert "log level set to DEBUG" in capsys.readouterr().err

    def test_flag_overrides_env(self, monkeypatch, capsys):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert main(["--log-level", "warning"]) == 0
        assert capsys.readouterr().err == ""

    def test_invalid_env_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "loud")
        with pytest.raises(SystemExit) as info:
            main([])
        assert info.value.code == 2

    def test_invalid_flag(self):
        with pytest.raises(SystemExit) as info:
            main(["--log-level", "loud"])
        assert info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as info:
            main(["--version"])
        assert info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_flag_overrides_invalid_env(self, monkeypatch, capsys):
        monkeypatch.setenv(LOG_LEVEL_ENV, "bogus")
        assert main(["--log-level", "debug"]) == 0
        assert "log level set to DEBUG" in capsys.readouterr().err
