import os

import pytest

from harmonica.config import BASE_DIR, Settings, configure_logging, get_settings


@pytest.fixture
def clean_env():
    """Restore environment variables after the test."""
    old_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(old_env)


def test_defaults():
    s = Settings(_env_file=None)
    assert s.reference_hz == 440.0
    assert s.default_tuning == "richter"
    assert s.precompute_harmonicas is False
    assert s.log_level == "INFO"


def test_alias_choices(clean_env):
    # _env_file=None keeps a local .env from leaking into the test
    os.environ.pop("REFERENCE_HZ", None)
    os.environ["A4_HZ"] = "442"
    s1 = Settings(_env_file=None)
    assert s1.reference_hz == 442.0

    del os.environ["A4_HZ"]

    os.environ["REFERENCE_HZ"] = "443"
    s2 = Settings(_env_file=None)
    assert s2.reference_hz == 443.0


def test_reference_pitch_clamps():
    assert Settings(REFERENCE_HZ=1000, _env_file=None).reference_hz == 480.0
    assert Settings(REFERENCE_HZ=100, _env_file=None).reference_hz == 400.0
    assert Settings(REFERENCE_HZ=-5, _env_file=None).reference_hz == 440.0


def test_default_tuning_normalized():
    assert Settings(DEFAULT_TUNING="Paddy_Richter", _env_file=None).default_tuning == "paddy-richter"
    # unknown tuning falls back to richter
    assert Settings(DEFAULT_TUNING="solo", _env_file=None).default_tuning == "richter"


def test_log_level_normalized():
    assert Settings(LOG_LEVEL="debug", _env_file=None).log_level == "DEBUG"
    assert Settings(LOG_LEVEL="chatty", _env_file=None).log_level == "INFO"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_accepts_settings():
    configure_logging(Settings(LOG_LEVEL="warning", _env_file=None))


def test_base_dir_is_project_root():
    assert (BASE_DIR / "harmonica").is_dir()
