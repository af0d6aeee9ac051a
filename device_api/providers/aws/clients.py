"""
AWS SDK client initialization.

Design Decision:
    The client is created once per process and handed to the store
    explicitly, instead of living in a module-level global. Tests pass a
    moto-backed or mocked client instead.

Usage:
    from device_api.providers.aws.clients import create_dynamodb_client

    client = create_dynamodb_client(region="eu-central-1")
"""

from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from device_api.core.exceptions import StoreInitializationError

# One attempt per request; the caller gets a 500 instead of a delayed retry.
CLIENT_CONFIG = Config(retries={"max_attempts": 1, "mode": "standard"})


def create_dynamodb_client(
    region: Optional[str] = None,
    endpoint_url: Optional[str] = None
) -> Any:
    """
    Create the boto3 DynamoDB client.

    Args:
        region: AWS region (e.g., "eu-central-1"). None uses the boto3 default chain.
        endpoint_url: Optional endpoint override (DynamoDB Local, LocalStack)

    Returns:
        boto3 DynamoDB client

    Raises:
        StoreInitializationError: If boto3 cannot build the client
            (e.g. no region configured anywhere)
    """
    kwargs = {"config": CLIENT_CONFIG}
    if region:
        kwargs["region_name"] = region
    if endpoint_url:
        kwargs["endpoint_url"] = endpoint_url

    try:
        session = boto3.session.Session()
        return session.client("dynamodb", **kwargs)
    except BotoCoreError as e:
        raise StoreInitializationError(
            "Failed to connect to AWS",
            operation="create_client",
            original_error=e
        )
