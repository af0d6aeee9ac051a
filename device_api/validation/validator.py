"""
Request body validation.

Turns the raw API Gateway body into a Device, or raises
InputValidationError with the message returned to the client.

Checks run in a fixed order and the first failure wins:
    1. Empty body
    2. Body is not a JSON object of strings
    3. ID, DeviceModel, Name, Note, Serial each non-empty
"""

import base64
import binascii
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from device_api import constants as CONSTANTS
from device_api.core.exceptions import InputValidationError
from device_api.core.models import Device
from device_api.logger import logger


def decode_body(event: Dict[str, Any]) -> Optional[bytes]:
    """
    Extract the request body from an API Gateway proxy event.

    Args:
        event: API Gateway proxy event (REST or HTTP API)

    Returns:
        Body bytes, or None if the event carries no body.

    Raises:
        InputValidationError: If a base64-flagged body cannot be decoded
    """
    body = event.get("body")
    if body is None:
        return None
    if isinstance(body, str):
        body = body.encode("utf-8")

    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("Request body is flagged base64 but could not be decoded")
            raise InputValidationError(CONSTANTS.MSG_WRONG_FORMAT)

    return body


def validate_device(raw_body: Union[bytes, str, None]) -> Device:
    """
    Parse and validate a request body.

    Args:
        raw_body: Raw request body

    Returns:
        A Device with all five fields non-empty.

    Raises:
        InputValidationError: On the first failed check
    """
    if not raw_body:
        raise InputValidationError(CONSTANTS.MSG_NO_INPUTS)

    try:
        device = Device.model_validate_json(raw_body)
    except ValidationError as e:
        logger.debug(f"Body deserialization failed: {e.error_count()} error(s)")
        raise InputValidationError(CONSTANTS.MSG_WRONG_FORMAT)

    for attribute, label in CONSTANTS.REQUIRED_DEVICE_FIELDS:
        if len(getattr(device, attribute)) == 0:
            raise InputValidationError(CONSTANTS.MSG_MISSING_FIELD.format(field=label))

    return device
