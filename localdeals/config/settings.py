"""Configuration settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geo Store
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "localdeals"
    mongodb_server_selection_timeout_ms: int = 5000

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit_max_requests: int = 10
    rate_limit_window_seconds: int = 60

    # Discovery & Geolocation
    default_radius_km: float = 5.0
    max_nearby_results: int = 500

    # HTTP
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    cors_origins: str = "*"

    # Logging
    log_level: str = "INFO"

    # Application
    app_name: str = "localdeals"
    environment: str = "development"

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse allowed CORS origins from comma-separated string."""
        if not self.cors_origins:
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    return Settings()
