import pytest

from berlin_clock.config import ConfigurationError, env_bool, env_int, env_str, runtime


def test_env_str_prefers_environment_over_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    runtime._DEFAULT_VALUES = {"BERLIN_CLOCK_LOG_DIR": "/from/dotenv"}
    monkeypatch.setenv("BERLIN_CLOCK_LOG_DIR", " /from/env ")

    assert env_str("BERLIN_CLOCK_LOG_DIR") == "/from/env"
    assert env_str("BERLIN_CLOCK_LOG_DIR", strip=False) == " /from/env "


def test_env_str_falls_back_to_defaults_then_or_value(monkeypatch: pytest.MonkeyPatch) -> None:
    runtime._DEFAULT_VALUES = {"FALLBACK": "dotenv"}
    monkeypatch.delenv("FALLBACK", raising=False)
    monkeypatch.setenv("BLANK", "   ")

    assert env_str("FALLBACK") == "dotenv"
    assert env_str("BLANK", "default") == "default"
    assert env_str("MISSING_SETTING") is None

    with pytest.raises(ConfigurationError, match="MISSING_SETTING"):
        env_str("MISSING_SETTING", required=True)


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("Yes", True), ("off", False), ("F", False)])
def test_env_bool_parses_known_values(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("FLAG", raw)

    assert env_bool("FLAG") is expected


def test_env_bool_rejects_unknown_and_missing_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLAG", "maybe")
    with pytest.raises(ConfigurationError, match="Invalid value for FLAG"):
        env_bool("FLAG")

    monkeypatch.delenv("FLAG")
    assert env_bool("FLAG", or_value=False) is False
    with pytest.raises(ConfigurationError):
        env_bool("FLAG", required=True)


def test_defaults_loaded_once_first_file_wins(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    first = tmp_path / "first.env"
    second = tmp_path / "second.env"
    first.write_text("SHARED=first\nONLY_FIRST=1\n")
    second.write_text("SHARED=second\nONLY_SECOND=2\n")
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (first, tmp_path / "absent.env", second))

    defaults = runtime._load_default_values()

    assert defaults == {"SHARED": "first", "ONLY_FIRST": "1", "ONLY_SECOND": "2"}
    assert runtime._load_default_values() is defaults


def test_env_int_reads_environment_then_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    runtime._DEFAULT_VALUES = {"FROM_DOTENV": "12"}
    monkeypatch.setenv("FROM_ENV", " 7 ")
    monkeypatch.delenv("FROM_DOTENV", raising=False)
    monkeypatch.delenv("UNSET_INT", raising=False)

    assert env_int("FROM_ENV") == 7
    assert env_int("FROM_DOTENV") == 12
    assert env_int("UNSET_INT", or_value=3) == 3
    assert env_int("UNSET_INT") is None


def test_env_int_rejects_non_integers_and_missing_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COUNT", "seven")
    with pytest.raises(ConfigurationError, match="Invalid value for COUNT: 'seven'. Expected an integer"):
        env_int("COUNT")

    monkeypatch.delenv("COUNT")
    with pytest.raises(ConfigurationError, match="COUNT"):
        env_int("COUNT", required=True)
