"""
Integration tests for DynamoDBDeviceStore against moto.
"""

import pytest

from device_api.core.exceptions import StoreError
from device_api.core.models import Device
from device_api.core.protocols import RecordStore
from device_api.providers.aws.dynamodb_store import DynamoDBDeviceStore
from tests.conftest import VALID_DEVICE
from tests.integration.aws.conftest import TABLE_NAME


class TestDynamoDBDeviceStore:

    def test_satisfies_record_store(self, dynamodb_client):
        assert isinstance(DynamoDBDeviceStore(dynamodb_client, TABLE_NAME), RecordStore)

    def test_put_writes_item_keyed_by_id(self, dynamodb_client):
        store = DynamoDBDeviceStore(dynamodb_client, TABLE_NAME)

        store.put(Device(**VALID_DEVICE))

        item = dynamodb_client.get_item(TableName=TABLE_NAME, Key={"ID": {"S": "d1"}})["Item"]
        assert item == {
            "ID": {"S": "d1"},
            "DeviceModel": {"S": "X1"},
            "Name": {"S": "Sensor"},
            "Note": {"S": "test"},
            "Serial": {"S": "SN001"},
        }

    def test_get_returns_stored_device(self, dynamodb_client):
        store = DynamoDBDeviceStore(dynamodb_client, TABLE_NAME)
        store.put(Device(**VALID_DEVICE))

        assert store.get("d1") == Device(**VALID_DEVICE)

    def test_get_unknown_id_returns_none(self, dynamodb_client):
        store = DynamoDBDeviceStore(dynamodb_client, TABLE_NAME)
        assert store.get("unknown") is None

    def test_duplicate_id_overwrites(self, dynamodb_client):
        store = DynamoDBDeviceStore(dynamodb_client, TABLE_NAME)
        store.put(Device(**VALID_DEVICE))
        store.put(Device(**{**VALID_DEVICE, "Name": "Renamed"}))

        assert store.get("d1").Name == "Renamed"
        assert dynamodb_client.scan(TableName=TABLE_NAME)["Count"] == 1

    def test_missing_table_raises_store_error(self, dynamodb_client):
        store = DynamoDBDeviceStore(dynamodb_client, "no-such-table")

        with pytest.raises(StoreError) as exc_info:
            store.put(Device(**VALID_DEVICE))

        assert exc_info.value.error_code == "ResourceNotFoundException"
