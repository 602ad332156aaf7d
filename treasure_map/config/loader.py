"""
Configuration loader utility for environment-specific settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from .settings import (
    Environment,
    LocationSettings,
    MapSettings,
    NavigationSettings,
    SearchSettings,
    Settings,
)

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""

    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.

        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development

        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")

        env = Environment(environment.lower())
        env_file_path = Path(f".env.{env.value}")

        if env_file_path.exists():
            env_file = str(env_file_path)
            return Settings(
                _env_file=env_file,
                environment=env,
                map=MapSettings(_env_file=env_file),
                search=SearchSettings(_env_file=env_file),
                location=LocationSettings(_env_file=env_file),
                navigation=NavigationSettings(_env_file=env_file),
            )

        logger.warning(f"Environment file {env_file_path} not found, using default settings")
        return Settings(environment=env)

    @staticmethod
    def get_available_environments(directory: str = ".") -> list[str]:
        """Get list of available environment configurations"""
        env_files = []
        for env_file in Path(directory).glob(".env.*"):
            if env_file.name.endswith(".sample"):
                continue
            env_files.append(env_file.name.replace(".env.", ""))
        return sorted(env_files)

    @staticmethod
    def validate_environment_config(environment: str) -> bool:
        """
        Validate that an environment configuration loads cleanly.

        Args:
            environment: Environment name to validate

        Returns:
            True if configuration is valid, False otherwise
        """
        try:
            settings = ConfigLoader.load_environment_config(environment)
        except ValueError as e:
            logger.warning(f"Invalid configuration for '{environment}': {e}")
            return False

        required_settings = [
            settings.app_name,
            settings.environment,
            settings.host,
            settings.port,
        ]
        return all(setting is not None for setting in required_settings)

    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """
        Create a sample .env file for the specified environment.

        Args:
            environment: Target environment
            output_path: Optional custom output path

        Returns:
            Path to the created sample file
        """
        env = Environment(environment.lower())

        if output_path is None:
            output_path = f".env.{env.value}.sample"

        defaults = Settings()

        sample_content = f"""# Sample configuration for {env.value} environment
# Copy this file to .env.{env.value} and modify as needed

# Application Configuration
APP_NAME={defaults.app_name}
APP_VERSION={defaults.app_version}
ENVIRONMENT={env.value}
DEBUG={'true' if env == Environment.DEVELOPMENT else 'false'}

# Server Configuration
HOST={defaults.host}
PORT={defaults.port}
RELOAD={'true' if env == Environment.DEVELOPMENT else 'false'}

# Logging Configuration
LOG_LEVEL={defaults.log_level.value}
LOG_FORMAT={defaults.log_format}

# Map Configuration
MAP_DEFAULT_LATITUDE={defaults.map.default_latitude}
MAP_DEFAULT_LONGITUDE={defaults.map.default_longitude}
MAP_DEFAULT_SPAN_M={defaults.map.default_span_m}
MAP_SEARCH_SPAN_M={defaults.map.search_span_m}
MAP_LOCATION_SPAN_M={defaults.map.location_span_m}
MAP_NEARBY_QUERY={defaults.map.nearby_query}

# Place Search Configuration
SEARCH_PROVIDER={'mock' if env == Environment.DEVELOPMENT else 'nominatim'}
SEARCH_API_URL={defaults.search.api_url}
SEARCH_TIMEOUT_SECONDS={defaults.search.timeout_seconds}
SEARCH_MAX_RESULTS={defaults.search.max_results}
SEARCH_USER_AGENT={defaults.search.user_agent}

# Location Configuration
LOCATION_AUTHORIZED=true
LOCATION_LATITUDE=43.6532
LOCATION_LONGITUDE=-79.3832

# Navigation Configuration
NAVIGATION_URI_SCHEME={defaults.navigation.uri_scheme}
NAVIGATION_MODE={defaults.navigation.mode}
"""

        with open(output_path, "w") as f:
            f.write(sample_content)

        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
