import os

from rigcheck.config import Settings, load_settings


def test_defaults(tmp_path, monkeypatch):
    for name in ("RIGCHECK_RELEVANCE_MODE", "RIGCHECK_LOG_LEVEL", "RIGCHECK_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings(tmp_path / "missing.env")
    assert settings == Settings()


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("RIGCHECK_RELEVANCE_MODE", "Message")
    monkeypatch.setenv("RIGCHECK_LOG_LEVEL", "debug")
    monkeypatch.setenv("RIGCHECK_CORS_ORIGINS", "http://localhost:5173, https://shop.example")
    settings = load_settings(tmp_path / "missing.env")

    assert settings.relevance_mode == "message"
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("http://localhost:5173", "https://shop.example")


def test_invalid_values_fall_back(tmp_path, monkeypatch):
    monkeypatch.setenv("RIGCHECK_RELEVANCE_MODE", "fuzzy")
    monkeypatch.setenv("RIGCHECK_LOG_LEVEL", "loud")
    monkeypatch.setenv("RIGCHECK_CORS_ORIGINS", " , ")
    settings = load_settings(tmp_path / "missing.env")

    assert settings == Settings()


def test_env_file_is_loaded(tmp_path, monkeypatch):
    monkeypatch.delenv("RIGCHECK_RELEVANCE_MODE", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("RIGCHECK_RELEVANCE_MODE=message\n", encoding="utf-8")
    try:
        settings = load_settings(env_file)
    finally:
        os.environ.pop("RIGCHECK_RELEVANCE_MODE", None)

    assert settings.relevance_mode == "message"
