from propguard.config import Settings, get_settings


def test_defaults():
    settings = Settings()

    assert settings.DEBUG is False
    assert settings.LOG_LEVEL == "info"
    assert settings.DEFAULT_SUBJECT_LABEL == "Property"
    assert settings.CACHE_DEFAULT_MESSAGE is False
    assert settings.VALUE_ENCODING == "utf-8"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PROPGUARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("PROPGUARD_VALUE_ENCODING", "latin-1")

    settings = get_settings()

    assert settings.LOG_LEVEL == "debug"
    assert settings.VALUE_ENCODING == "latin-1"


def test_settings_are_cached():
    assert get_settings() is get_settings()
