"""
Custom exceptions for the device API.

Exception Hierarchy:
    DeviceApiError (base)
    ├── InputValidationError - Request body is empty, malformed or incomplete
    ├── StoreError - Record store operation failed
    │   └── StoreInitializationError - Store connection could not be created
    └── ConfigurationError - Required environment variable missing
"""

from typing import Optional


class DeviceApiError(Exception):
    """
    Base exception for all device API errors.

    The request handler catches this class and turns it into a response;
    anything else propagates to the Lambda runtime.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InputValidationError(DeviceApiError):
    """
    Raised when the request body cannot be turned into a valid Device.

    The message is returned verbatim to the client with HTTP 400, so it
    must never contain internal detail.

    Example:
        >>> validate_device(b'{"ID": "d1"}')
        InputValidationError: Missing field: Device Model
    """
    pass


class StoreError(DeviceApiError):
    """
    Raised when a record store operation fails.

    Covers network failures, throttling, missing permissions and a store
    whose connection was never initialized. Surfaced as a generic HTTP 500.

    Attributes:
        operation: Store operation that failed (e.g. "put")
        error_code: AWS error code when available
        original_error: The underlying exception
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        error_code: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.operation = operation
        self.error_code = error_code
        self.original_error = original_error

        details = []
        if operation:
            details.append(f"operation={operation}")
        if error_code:
            details.append(f"code={error_code}")
        if details:
            message = f"{message} [{', '.join(details)}]"

        super().__init__(message)


class StoreInitializationError(StoreError):
    """
    Raised when the store client cannot be created at process start.

    Not fatal: the failure is logged and every later write fails with
    StoreError instead.
    """
    pass


class ConfigurationError(DeviceApiError):
    """
    Raised when a required environment variable is missing or empty.

    Attributes:
        variable: Name of the offending environment variable
    """

    def __init__(self, message: str, variable: Optional[str] = None):
        self.variable = variable
        super().__init__(message)
