import json
import os
from typing import Dict, List, Optional

import pytest

from device_api.core.exceptions import StoreError
from device_api.core.models import Device
from device_api.handlers import add_device


VALID_DEVICE = {
    "ID": "d1",
    "DeviceModel": "X1",
    "Name": "Sensor",
    "Note": "test",
    "Serial": "SN001",
}


@pytest.fixture(scope="function", autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables to prevent accidental cloud calls."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-central-1")
    monkeypatch.setenv("AWS_REGION", "eu-central-1")
    monkeypatch.setenv("DEVICES_TABLE_NAME", "test-devices")
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)


@pytest.fixture(autouse=True)
def reset_process_handler():
    """Drop the cached process-wide handler between tests."""
    add_device.reset_handler()
    yield
    add_device.reset_handler()


class FakeDeviceStore:
    """In-memory RecordStore double that records every call."""

    def __init__(self, fail_with: Optional[Exception] = None):
        self.items: Dict[str, Device] = {}
        self.put_calls: List[Device] = []
        self.fail_with = fail_with

    def put(self, device: Device) -> None:
        self.put_calls.append(device)
        if self.fail_with is not None:
            raise self.fail_with
        self.items[device.ID] = device

    def get(self, device_id: str) -> Optional[Device]:
        return self.items.get(device_id)


@pytest.fixture
def fake_store():
    return FakeDeviceStore()


@pytest.fixture
def failing_store():
    return FakeDeviceStore(fail_with=StoreError("Failed to write device", operation="put", error_code="ProvisionedThroughputExceededException"))


@pytest.fixture
def valid_device_body():
    return json.dumps(VALID_DEVICE)


def make_event(body, base64_encoded=False):
    """Build a minimal API Gateway proxy event."""
    return {
        "httpMethod": "POST",
        "path": "/devices",
        "headers": {"Content-Type": "application/json"},
        "body": body,
        "isBase64Encoded": base64_encoded,
    }
