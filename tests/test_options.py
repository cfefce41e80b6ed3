import pytest

from kwextract.options import (
    DEFAULTS,
    ENV_VAR,
    OptionError,
    get_option,
    get_options,
    parse_options,
    reload_options,
    set_options,
)


def test_defaults():
    assert parse_options("") == DEFAULTS
    assert get_options() == DEFAULTS


def test_parse():
    opts = parse_options("check_schema=false&trace=1")
    assert opts == {"check_schema": False, "trace": True}


def test_parse_errors():
    with pytest.raises(OptionError, match="Unknown option"):
        parse_options("color=red")
    with pytest.raises(OptionError, match="expects a boolean"):
        parse_options("trace=maybe")
    with pytest.raises(OptionError, match="more than once"):
        parse_options("trace=1&trace=0")
    with pytest.raises(OptionError, match="Malformed"):
        parse_options("trace")


def test_environment(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "trace=off")
    assert parse_options()["trace"] is False
    reload_options()
    assert get_option("trace") is False


def test_set_options():
    with set_options(trace="no"):
        assert get_option("trace") is False
        assert get_option("check_schema") is True
    assert get_option("trace") is True
    with pytest.raises(OptionError):
        with set_options(nope=True):
            pass


def test_set_options_non_str():
    with set_options(trace=0):
        assert get_option("trace") is False
    with set_options(trace=1):
        assert get_option("trace") is True
    with pytest.raises(OptionError, match="expects a boolean"):
        with set_options(trace=2):
            pass
    with pytest.raises(OptionError, match="expects a boolean"):
        with set_options(trace=None):
            pass
