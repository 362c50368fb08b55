"""Runtime configuration for Street Guesser."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="STREET_GUESSER_", env_file=".env", extra="ignore")

    app_name: str = "street-guesser"
    log_level: str = "INFO"
    provider_backend: str = Field(
        default="demo",
        description="Imagery backend: 'google' (Street View metadata API) or 'demo' (offline).",
    )
    maps_api_key: str | None = Field(default=None, description="Google Maps API key for the google backend.")
    lookup_timeout_seconds: float = 10.0
    demo_failure_rate: float = Field(default=0.3, ge=0.0, le=1.0)
    random_seed: int | None = None


settings = Settings()
