"""
DynamoDB-backed record store.

Items are written with the low-level client, so devices are converted to
the attribute-value format first:

    Device(ID="d1", Name="Sensor", ...)
      -> {"ID": {"S": "d1"}, "Name": {"S": "Sensor"}, ...}

Duplicate IDs overwrite the stored item (plain PutItem semantics).
"""

from typing import Any, Dict, Optional

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from device_api import constants as CONSTANTS
from device_api.core.config import Settings
from device_api.core.exceptions import ConfigurationError, StoreError, StoreInitializationError
from device_api.core.models import Device
from device_api.logger import logger
from .clients import create_dynamodb_client

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def serialize_item(device: Device) -> Dict[str, Dict[str, Any]]:
    """Convert a Device into a DynamoDB attribute-value map."""
    return {key: _serializer.serialize(value) for key, value in device.to_item().items()}


def deserialize_item(item: Dict[str, Dict[str, Any]]) -> Device:
    """Convert a DynamoDB attribute-value map back into a Device."""
    return Device(**{key: _deserializer.deserialize(value) for key, value in item.items()})


def _error_code(error: Exception) -> Optional[str]:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code")
    return None


class DynamoDBDeviceStore:
    """
    RecordStore implementation on top of a DynamoDB table.

    Args:
        client: boto3 DynamoDB client, or None if initialization failed.
            A store without a client fails every call with StoreError.
        table_name: Name of the target table
    """

    def __init__(self, client: Any, table_name: Optional[str]):
        self._client = client
        self._table_name = table_name

    @property
    def table_name(self) -> Optional[str]:
        return self._table_name

    @property
    def available(self) -> bool:
        return self._client is not None and bool(self._table_name)

    def _require_client(self, operation: str) -> Any:
        if not self.available:
            raise StoreError("Store connection is not initialized", operation=operation)
        return self._client

    def put(self, device: Device) -> None:
        client = self._require_client("put")
        try:
            client.put_item(TableName=self._table_name, Item=serialize_item(device))
        except (ClientError, BotoCoreError) as e:
            code = _error_code(e)
            logger.error(f"PutItem failed for table '{self._table_name}' (code={code}): {e}")
            raise StoreError("Failed to write device", operation="put", error_code=code, original_error=e)
        logger.debug(f"Stored device '{device.ID}' in '{self._table_name}'")

    def get(self, device_id: str) -> Optional[Device]:
        client = self._require_client("get")
        try:
            response = client.get_item(
                TableName=self._table_name,
                Key={CONSTANTS.DEVICE_PRIMARY_KEY: _serializer.serialize(device_id)},
            )
        except (ClientError, BotoCoreError) as e:
            code = _error_code(e)
            logger.error(f"GetItem failed for table '{self._table_name}' (code={code}): {e}")
            raise StoreError("Failed to read device", operation="get", error_code=code, original_error=e)

        item = response.get("Item")
        if item is None:
            return None
        return deserialize_item(item)


def create_device_store(settings: Optional[Settings] = None) -> DynamoDBDeviceStore:
    """
    Build the process-wide store.

    Initialization failures are logged, never raised: the returned store
    then fails each request with StoreError (HTTP 500).

    Args:
        settings: Settings to use. Read from the environment if omitted.
    """
    try:
        if settings is None:
            settings = Settings.from_env()
    except ConfigurationError as e:
        logger.error(f"Device store disabled: {e.message}")
        return DynamoDBDeviceStore(None, None)

    try:
        client = create_dynamodb_client(settings.region, settings.endpoint_url)
    except StoreInitializationError as e:
        logger.error(f"{e.message}: {e.original_error}")
        return DynamoDBDeviceStore(None, settings.table_name)

    logger.info(f"Device store ready (table='{settings.table_name}', region={settings.region or 'default'})")
    return DynamoDBDeviceStore(client, settings.table_name)
