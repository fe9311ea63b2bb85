from auth_service.app.config import Settings


def test_defaults(monkeypatch):
    for name in ("PROJECT_NAME", "APP_VERSION", "APP_ENV", "LOG_LEVEL", "ALLOWED_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PROJECT_NAME == "auth_service"
    assert settings.APP_VERSION == "0.1.0"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.allowed_origins == ["http://localhost:3000", "http://localhost:8000"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://id.example.com, ,https://admin.example.com")

    settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.allowed_origins == ["https://id.example.com", "https://admin.example.com"]
