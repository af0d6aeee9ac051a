"""
Protocol definitions for the device API.

The request handler only talks to storage through RecordStore. The
DynamoDB store satisfies it in production; tests pass an in-memory double.

Why Protocols instead of ABC?
    - No explicit inheritance required (duck typing)
    - Runtime checking with @runtime_checkable decorator
"""

from typing import Optional, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Device


@runtime_checkable
class RecordStore(Protocol):
    """
    Protocol defining the key-value store that holds devices.

    Implementations must raise StoreError for any failure of the
    underlying service and must not retry.
    """

    def put(self, device: "Device") -> None:
        """
        Write a device, keyed by device.ID.

        Raises:
            StoreError: If the write fails
        """
        ...

    def get(self, device_id: str) -> Optional["Device"]:
        """
        Read a device by ID.

        Returns:
            The stored Device, or None if no item has this ID.

        Raises:
            StoreError: If the read fails
        """
        ...
