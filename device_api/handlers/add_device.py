"""
Add Device Lambda Function.

Validates the API Gateway request body, writes the device to the record
store and answers with the stored device.

    valid body, write ok     -> 201 + device JSON
    invalid body             -> 400 + reason (no write)
    write failed             -> 500 + fixed database error text

Deployed handler: device_api.handlers.add_device.lambda_handler
"""

from typing import Any, Dict, Optional

from device_api import constants as CONSTANTS
from device_api.core.exceptions import InputValidationError, StoreError
from device_api.core.protocols import RecordStore
from device_api.logger import logger
from device_api.providers.aws.dynamodb_store import create_device_store
from device_api.validation.validator import decode_body, validate_device


def build_response(status_code: int, body: str, content_type: str = CONSTANTS.CONTENT_TYPE_TEXT) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": content_type},
        "body": body,
    }


class AddDeviceHandler:
    """
    Composes validation and persistence into one request/response cycle.

    Args:
        store: Any RecordStore; the handler never touches a concrete client.
    """

    def __init__(self, store: RecordStore):
        self._store = store

    @property
    def store(self) -> RecordStore:
        return self._store

    def handle(self, event: Dict[str, Any], request_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Handle a single API Gateway proxy event.

        Args:
            event: API Gateway proxy event
            request_id: Lambda request id, used for log correlation only

        Returns:
            API Gateway proxy response dict
        """
        request_id = request_id or "-"

        try:
            device = validate_device(decode_body(event))
        except InputValidationError as e:
            logger.warning(f"[{request_id}] Rejected device ({CONSTANTS.HTTP_BAD_REQUEST}): {e.message}")
            return build_response(CONSTANTS.HTTP_BAD_REQUEST, e.message)

        try:
            self._store.put(device)
        except StoreError as e:
            logger.error(f"[{request_id}] Could not store device '{device.ID}' ({CONSTANTS.HTTP_INTERNAL_SERVER_ERROR}): {e}")
            return build_response(CONSTANTS.HTTP_INTERNAL_SERVER_ERROR, CONSTANTS.MSG_DATABASE_ERROR)

        logger.info(f"[{request_id}] Created device '{device.ID}' ({CONSTANTS.HTTP_CREATED})")
        return build_response(CONSTANTS.HTTP_CREATED, device.to_json(), CONSTANTS.CONTENT_TYPE_JSON)


# ==========================================
# Process-wide handler (one per Lambda container)
# ==========================================

_handler: Optional[AddDeviceHandler] = None


def get_handler() -> AddDeviceHandler:
    """Lazy initialization of the handler and its store on first invocation."""
    global _handler
    if _handler is None:
        _handler = AddDeviceHandler(create_device_store())
    return _handler


def set_handler(handler: AddDeviceHandler) -> None:
    """Install a pre-built handler, e.g. one wired to a test double store."""
    global _handler
    _handler = handler


def reset_handler() -> None:
    global _handler
    _handler = None


def lambda_handler(event, context):
    request_id = getattr(context, "aws_request_id", None)
    return get_handler().handle(event or {}, request_id=request_id)
