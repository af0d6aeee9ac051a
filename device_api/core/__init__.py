"""
Core building blocks: models, configuration, protocols and exceptions.
"""

from .exceptions import (
    DeviceApiError,
    InputValidationError,
    StoreError,
    StoreInitializationError,
    ConfigurationError,
)
from .models import Device
from .protocols import RecordStore

__all__ = [
    "DeviceApiError",
    "InputValidationError",
    "StoreError",
    "StoreInitializationError",
    "ConfigurationError",
    "Device",
    "RecordStore",
]
