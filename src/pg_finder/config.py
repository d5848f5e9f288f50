"""Application configuration using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pg_finder.constants import DEFAULT_LOCATIONS, DEFAULT_SERVICES


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PG_FINDER_",
        extra="ignore",
    )

    # Listings API
    api_base_url: str = Field(
        default="http://localhost:5000",
        description="Base URL of the listings backend",
    )
    properties_path: str = Field(
        default="/api/properties",
        description="Path of the endpoint returning the full listing array",
    )
    request_timeout_seconds: float = Field(default=10.0, gt=0, le=120)

    # Filter form options
    locations: str = Field(
        default=",".join(DEFAULT_LOCATIONS),
        description="Comma-separated locations offered in the location dropdown",
    )
    services: str = Field(
        default=",".join(DEFAULT_SERVICES),
        description="Comma-separated amenities offered as service checkboxes",
    )

    # Web API
    web_port: int = Field(default=8000, description="Web server port")
    web_host: str = Field(default="0.0.0.0", description="Web server host")
    log_json: bool = Field(default=False, description="Emit JSON log lines instead of console output")

    @property
    def properties_url(self) -> str:
        """Absolute URL of the listings endpoint."""
        return f"{self.api_base_url.rstrip('/')}/{self.properties_path.lstrip('/')}"

    def get_locations(self) -> list[str]:
        """Parse locations string into a list of location names."""
        return [loc.strip() for loc in self.locations.split(",") if loc.strip()]

    def get_services(self) -> list[str]:
        """Parse services string into a list of amenity labels."""
        return [s.strip() for s in self.services.split(",") if s.strip()]
