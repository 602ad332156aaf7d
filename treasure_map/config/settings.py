"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional
from enum import Enum
import os


def _env_files() -> tuple:
    """Shared .env file plus the one for the active ENVIRONMENT"""
    return (".env", f".env.{os.getenv('ENVIRONMENT', 'development').lower()}")


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class SearchProvider(str, Enum):
    """Place search backends"""
    MOCK = "mock"
    NOMINATIM = "nominatim"


class MapSettings(BaseSettings):
    """Map viewport and annotation configuration"""

    # Central Canada, 2000 km across
    default_latitude: float = Field(default=56.1304, ge=-90.0, le=90.0)
    default_longitude: float = Field(default=-106.3468, ge=-180.0, le=180.0)
    default_span_m: float = Field(default=2_000_000.0, gt=0)

    search_span_m: float = Field(default=1000.0, gt=0, description="Span used after a place search")
    location_span_m: float = Field(default=5000.0, gt=0, description="Span used after a location fix")
    nearby_query: str = Field(default="restaurant")
    tap_image_tag: str = Field(default="default.jpg")

    model_config = {"env_prefix": "MAP_", "env_file": _env_files(), "extra": "ignore"}


class SearchSettings(BaseSettings):
    """Place search service configuration"""

    provider: SearchProvider = Field(default=SearchProvider.MOCK)
    api_url: str = Field(default="https://nominatim.openstreetmap.org")
    timeout_seconds: float = Field(default=10.0, gt=0, le=60)
    max_results: int = Field(default=10, ge=1, le=50)
    user_agent: str = Field(default="treasure-map/1.0")

    @field_validator('provider', mode='before')
    @classmethod
    def normalize_provider(cls, v):
        """Accept provider names in any case"""
        if isinstance(v, str):
            return SearchProvider(v.lower())
        return v

    model_config = {"env_prefix": "SEARCH_", "env_file": _env_files(), "extra": "ignore"}


class LocationSettings(BaseSettings):
    """Device location stand-in configuration"""

    authorized: bool = Field(default=True)
    latitude: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(default=None, ge=-180.0, le=180.0)

    model_config = {"env_prefix": "LOCATION_", "env_file": _env_files(), "extra": "ignore"}


class NavigationSettings(BaseSettings):
    """External navigation hand-off configuration"""

    uri_scheme: str = Field(default="externalmaps")
    mode: str = Field(default="driving")

    model_config = {"env_prefix": "NAVIGATION_", "env_file": _env_files(), "extra": "ignore"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Treasure Map")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", description="'json' or 'text'")

    # Nested Settings
    map: MapSettings = Field(default_factory=MapSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    location: LocationSettings = Field(default_factory=LocationSettings)
    navigation: NavigationSettings = Field(default_factory=NavigationSettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    model_config = {
        "env_file": _env_files(),
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def _build_settings() -> Settings:
    env_files = _env_files()
    return Settings(
        _env_file=env_files,
        map=MapSettings(_env_file=env_files),
        search=SearchSettings(_env_file=env_files),
        location=LocationSettings(_env_file=env_files),
        navigation=NavigationSettings(_env_file=env_files),
    )


# Global settings instance
settings = _build_settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = _build_settings()
    return settings
