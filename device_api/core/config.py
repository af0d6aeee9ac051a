"""
Environment-based configuration.

Usage:
    from device_api.core.config import Settings

    settings = Settings.from_env()
    settings.table_name   # "devices-table"
"""

import os
from dataclasses import dataclass
from typing import Optional

from device_api import constants as CONSTANTS
from .exceptions import ConfigurationError


def require_env(name: str) -> str:
    """
    Get a required environment variable.

    Args:
        name: The environment variable name

    Returns:
        The stripped environment variable value

    Raises:
        ConfigurationError: If the variable is missing or empty
    """
    value = os.environ.get(name, "").strip()
    if not value:
        raise ConfigurationError(
            f"Required environment variable '{name}' is missing or empty",
            variable=name
        )
    return value


def optional_env(name: str) -> Optional[str]:
    value = os.environ.get(name, "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """
    Process-wide settings, read once at cold start.

    Attributes:
        table_name: DynamoDB table receiving devices
        region: AWS region of the DynamoDB endpoint (None lets boto3 decide)
        endpoint_url: Optional endpoint override, e.g. DynamoDB Local
    """
    table_name: str
    region: Optional[str] = None
    endpoint_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the process environment.

        Raises:
            ConfigurationError: If DEVICES_TABLE_NAME is not set
        """
        return cls(
            table_name=require_env(CONSTANTS.ENV_TABLE_NAME),
            region=optional_env(CONSTANTS.ENV_AWS_REGION),
            endpoint_url=optional_env(CONSTANTS.ENV_DYNAMODB_ENDPOINT_URL),
        )
