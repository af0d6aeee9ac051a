import boto3
import pytest
from moto import mock_aws

TABLE_NAME = "test-devices"
REGION = "eu-central-1"


@pytest.fixture(scope="function")
def dynamodb_client():
    """moto-backed DynamoDB client with the devices table created."""
    with mock_aws():
        client = boto3.client("dynamodb", region_name=REGION)
        client.create_table(
            TableName=TABLE_NAME,
            KeySchema=[{"AttributeName": "ID", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "ID", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        yield client
