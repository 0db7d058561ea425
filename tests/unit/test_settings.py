"""Unit tests for settings loading."""

from localdeals.config.settings import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.default_radius_km == 5.0
    assert settings.max_nearby_results == 500
    assert settings.mongodb_database == "localdeals"
    assert settings.api_port == 5000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MONGODB_URL", "mongodb://db.internal:27017")
    monkeypatch.setenv("MAX_NEARBY_RESULTS", "100")
    monkeypatch.setenv("RATE_LIMIT_ENABLED", "false")

    settings = Settings(_env_file=None)

    assert settings.mongodb_url == "mongodb://db.internal:27017"
    assert settings.max_nearby_results == 100
    assert settings.rate_limit_enabled is False


def test_cors_origin_list():
    settings = Settings(cors_origins="https://a.example, https://b.example,", _env_file=None)

    assert settings.cors_origin_list == ["https://a.example", "https://b.example"]
