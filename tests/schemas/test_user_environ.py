import pytest

from almanac.schemas import ParamConfig, UserConfig, resolve_config

pytestmark = pytest.mark.unit


def test_from_environ_reads_aoc_variables():
    environ = {
        "AOC_URL": "http://localhost:9999",
        "AOC_INPUT_DIR": "/data/aoc",
        "AOC_SESSION_ID": "abc123",
        "PATH": "/usr/bin",
        "HOME": "/root",
    }
    user = UserConfig.from_environ(environ)
    assert user.base_url == "http://localhost:9999"
    assert user.session_id == "abc123"

    config = resolve_config(ParamConfig(), user, None)
    assert config.fetch.input_dir == "/data/aoc"
    assert config.fetch.session_id == "abc123"


def test_from_environ_coerces_strings():
    user = UserConfig.from_environ({"SEARCH_STEP": "250", "MAX_LOCATION": "99", "LOG_LEVEL": "debug"})
    config = resolve_config(ParamConfig(), user, None)
    assert config.search.step == 250
    assert config.search.max_location == 99
    assert config.logging.level == "DEBUG"


def test_empty_environ_keeps_defaults():
    config = resolve_config(ParamConfig(), UserConfig.from_environ({}), None)
    assert config == resolve_config(ParamConfig(), None, None)


def test_from_environ_defaults_to_os_environ(monkeypatch):
    monkeypatch.setenv("AOC_SESSION_ID", "from-env")
    assert UserConfig.from_environ().session_id == "from-env"


def test_environ_url_trailing_slash_stripped():
    user = UserConfig.from_environ({"AOC_URL": "http://localhost:9999/"})
    config = resolve_config(ParamConfig(), user, None)
    assert config.fetch.base_url == "http://localhost:9999"
