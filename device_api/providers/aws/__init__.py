"""
AWS record store (DynamoDB).
"""

from .clients import create_dynamodb_client
from .dynamodb_store import DynamoDBDeviceStore, create_device_store

__all__ = ["create_dynamodb_client", "DynamoDBDeviceStore", "create_device_store"]
