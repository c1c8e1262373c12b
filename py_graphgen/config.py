"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8",
                                      extra="ignore")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Graph Generation Configuration
    default_point_count: int = Field(default=50, description="Default number of points")
    default_width: int = Field(default=800, description="Default field width")
    default_height: int = Field(default=600, description="Default field height")
    max_point_count: int = Field(default=500, description="Max points per graph")
    max_field_size: int = Field(default=4000, description="Max field width or height")
    max_attempts_per_point: int = Field(
        default=1000, description="Placement draws allowed per point before giving up"
    )
    boundary_walk_neighbors: int = Field(
        default=30, description="Neighbors considered per boundary walk step"
    )

    # Performance Configuration
    cache_size: int = Field(default=128, description="Generated graphs kept in memory")


settings = Settings()
