"""12-factor configuration adapter using environment variables and a .env file."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from siri_departures.domain.ports.stop_resolver import RESOLUTION_MODES


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # SIRI endpoint configuration
    siri_endpoint: str = Field(description="URL of the SIRI StopMonitoring endpoint")
    dataset_id: str = Field(description="Dataset identifier sent in the datasetId header")
    siri_requestor_ref: str = Field(
        default="opendata", description="RequestorRef sent in SIRI service requests"
    )
    request_timeout_seconds: int = Field(
        default=10, description="Timeout for SIRI requests in seconds"
    )
    log_requests: bool = Field(
        default=False, description="Log every SIRI request (URL, headers, payload)"
    )

    # Topology configuration
    # Relative paths are resolved against the current working directory
    netex_file: Path = Field(description="Path to the NeTEx stop topology document")

    # Query and prompt configuration
    departure_limit: int = Field(
        default=5, description="Maximum number of departures to show per stop"
    )
    search_page_size: int = Field(
        default=10, description="Number of candidates shown per search prompt"
    )
    resolution_mode: str = Field(
        default="stop",
        description="Default interactive search: 'stop' (single stop) or 'station' (station then quays)",
    )

    @field_validator("siri_endpoint", "dataset_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Validate required strings are not blank."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("departure_limit", "search_page_size", "request_timeout_seconds")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counts and timeouts are positive."""
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("resolution_mode")
    @classmethod
    def validate_resolution_mode(cls, v: str) -> str:
        """Validate resolution mode is either 'stop' or 'station'."""
        if v.lower() not in RESOLUTION_MODES:
            raise ValueError("resolution_mode must be either 'stop' or 'station'")
        return v.lower()

    @property
    def netex_path(self) -> Path:
        """Absolute path of the topology document."""
        return self.netex_file if self.netex_file.is_absolute() else Path.cwd() / self.netex_file
