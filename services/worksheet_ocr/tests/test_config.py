import pytest

from worksheet_ocr.config import LENIENT, STRICT, CategoryMode, get_profile, load_config

ENV_KEYS = (
    "WORKSHEET_PROFILE",
    "WORKSHEET_CATEGORY_MODE",
    "WORKSHEET_FUZZY_THRESHOLD",
    "WORKSHEET_CAPS_RATIO",
    "WORKSHEET_HEADER_MAX_LENGTH",
    "WORKSHEET_MIN_LINE_LENGTH",
    "WORKSHEET_MIN_ROWS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_match_strict_profile():
    config = load_config()
    assert config == STRICT
    assert config.fuzzy_threshold == 60
    assert config.caps_ratio == 0.5
    assert config.header_max_length == 50
    assert config.category_mode is CategoryMode.OPEN


def test_profile_and_overrides_from_env(monkeypatch):
    monkeypatch.setenv("WORKSHEET_PROFILE", "lenient")
    monkeypatch.setenv("WORKSHEET_CATEGORY_MODE", "Closed")
    monkeypatch.setenv("WORKSHEET_FUZZY_THRESHOLD", "75")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = load_config()

    assert config.min_rows == LENIENT.min_rows == 1
    assert config.min_line_length == 2
    assert config.category_mode is CategoryMode.CLOSED
    assert config.fuzzy_threshold == 75
    assert config.log_level == "DEBUG"


def test_blank_env_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("WORKSHEET_MIN_ROWS", "  ")
    assert load_config().min_rows == 3


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("WORKSHEET_MIN_ROWS", "three"),
        ("WORKSHEET_CAPS_RATIO", "half"),
        ("WORKSHEET_FUZZY_THRESHOLD", "150"),
        ("WORKSHEET_PROFILE", "paranoid"),
        ("WORKSHEET_CATEGORY_MODE", "enum"),
    ],
)
def test_invalid_env_values_raise(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValueError):
        load_config()


def test_get_profile_is_case_insensitive():
    assert get_profile(" STRICT ") is STRICT
    with pytest.raises(ValueError):
        get_profile("unknown")


def test_with_overrides_returns_new_config():
    closed = STRICT.with_overrides(category_mode=CategoryMode.CLOSED)
    assert closed.category_mode is CategoryMode.CLOSED
    assert STRICT.category_mode is CategoryMode.OPEN
