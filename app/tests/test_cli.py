"""
Tests for the command line interface.
"""

import pytest

from string_calculator.__main__ import decode_argument, main
from string_calculator.logging_config import reset_logging


@pytest.fixture(autouse=True)
def cli_env(monkeypatch):
    for key in ("CALCULATOR_UPPER_LIMIT", "LOG_LEVEL", "LOG_JSON", "LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
    yield monkeypatch
    reset_logging()


def test_decode_argument():
    assert decode_argument("//;\\n1;2") == "//;\n1;2"


def test_evaluates_arguments(capsys):
    assert main(["1,2", "//[*][%]\\n1*2%3"]) == 0
    out = capsys.readouterr().out.split()
    assert out == ["3", "6"]


def test_reports_negatives(capsys):
    """Should print the error and exit with status 1."""
    assert main(["1,2", "-3,1,-1,-2"]) == 1
    out = capsys.readouterr().out
    assert "Negatives not allowed: -3,-1,-2" in out


def test_uses_configured_limit(cli_env, capsys):
    cli_env.setenv("CALCULATOR_UPPER_LIMIT", "10")
    assert main(["5,11"]) == 0
    assert capsys.readouterr().out.strip() == "5"


def test_bad_config_exits_with_2(cli_env, capsys):
    cli_env.setenv("LOG_LEVEL", "LOUD")
    assert main(["1"]) == 2
    assert "LOG_LEVEL" in capsys.readouterr().out


def test_interactive_session(cli_env, capsys):
    """Should evaluate lines until 'q'."""
    lines = iter(["1\\n2,3", "-1", "q"])
    cli_env.setattr("builtins.input", lambda prompt="": next(lines))

    assert main(["--interactive"]) == 1
    out = capsys.readouterr().out
    assert "6" in out
    assert "Negatives not allowed: -1" in out


def test_interactive_stops_on_eof(cli_env):
    def raise_eof(prompt=""):
        raise EOFError

    cli_env.setattr("builtins.input", raise_eof)
    assert main([]) == 0
