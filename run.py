#!/usr/bin/env python3
"""
Application startup script with environment configuration support.
"""

import os
import sys
import argparse

from treasure_map.config.loader import ConfigLoader, load_config_for_environment
from treasure_map.config.settings import reload_settings


def main():
    """Main startup function with environment configuration"""
    parser = argparse.ArgumentParser(description="Treasure Map Server")
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production", "testing"],
        default=None,
        help="Environment to run (default: from ENVIRONMENT env var or development)"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (overrides config)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (overrides config)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload (overrides config)"
    )
    parser.add_argument(
        "--list-envs",
        action="store_true",
        help="List available environment configurations"
    )
    parser.add_argument(
        "--validate-env",
        help="Validate a specific environment configuration"
    )
    parser.add_argument(
        "--create-sample",
        help="Create a sample .env file for the specified environment"
    )

    args = parser.parse_args()

    if args.list_envs:
        envs = ConfigLoader.get_available_environments()
        print("Available environment configurations:")
        for env in envs:
            print(f"  - {env}")
        return

    if args.validate_env:
        if ConfigLoader.validate_environment_config(args.validate_env):
            print(f"✓ Environment '{args.validate_env}' configuration is valid")
        else:
            print(f"✗ Environment '{args.validate_env}' configuration is invalid")
            sys.exit(1)
        return

    if args.create_sample:
        try:
            sample_file = ConfigLoader.create_sample_env_file(args.create_sample)
        except (OSError, ValueError) as e:
            print(f"✗ Failed to create sample configuration: {e}")
            sys.exit(1)
        print(f"✓ Sample configuration created: {sample_file}")
        return

    try:
        settings = load_config_for_environment(args.env)
    except ValueError as e:
        print(f"✗ Failed to load configuration: {e}")
        sys.exit(1)
    print(f"✓ Loaded configuration for environment: {settings.environment.value}")

    host = args.host or settings.host
    port = args.port or settings.port
    reload = args.reload or settings.reload

    print(f"🚀 Starting {settings.app_name} v{settings.app_version}")
    print(f"   Environment: {settings.environment.value}")
    print(f"   Host: {host}")
    print(f"   Port: {port}")
    print(f"   Search provider: {settings.search.provider.value}")
    print(f"   Log Level: {settings.log_level.value}")

    # The app process reads .env.<ENVIRONMENT> through the global settings
    os.environ["ENVIRONMENT"] = settings.environment.value
    reload_settings()

    import uvicorn

    # One worker: the treasure screen lives in process memory
    uvicorn.run(
        "treasure_map.main:app",
        host=host,
        port=port,
        reload=reload,
        workers=1,
        log_level=settings.log_level.value.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
