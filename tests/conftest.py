"""
Test configuration and fixtures for the DynamoDB accessor.

Provides table configurations, an AsyncMock store client for unit tests,
and a moto-backed async client for round trips against DynamoDB semantics.
Record models live in tests.helpers.
"""

from unittest.mock import AsyncMock

import boto3
import pytest
from moto import mock_aws

from dynamodb_accessor import DynamoDBConfig, TableConfig

from .helpers import AsyncClientAdapter


@pytest.fixture
def note_sample():
    """A record that satisfies the Note schema."""
    return {
        'completed': False,
        'id': '123',
        'owner': '@guidiego',
        'text': 'Hello accessor!',
    }


@pytest.fixture
def hash_config():
    """Hash-only table configuration."""
    return TableConfig(table_name='notes', hash_key='id')


@pytest.fixture
def range_config():
    """Hash + range table configuration."""
    return TableConfig(table_name='notes', hash_key='id', range_key='owner')


@pytest.fixture
def store_client():
    """Store client whose point operations are AsyncMocks."""
    client = AsyncMock()
    client.get_item.return_value = {}
    client.put_item.return_value = {}
    client.update_item.return_value = {}
    client.delete_item.return_value = {}
    return client


@pytest.fixture
def mock_dynamodb_config():
    """DynamoDB configuration for mocked testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,
        environment="test",
        table_prefix="app"
    )


@pytest.fixture
def mock_dynamodb_client():
    """boto3 DynamoDB client backed by moto."""
    with mock_aws():
        yield boto3.client('dynamodb', region_name='us-east-1')


@pytest.fixture
def tasks_table(mock_dynamodb_client):
    """Create a hash-only tasks table and return its name."""
    mock_dynamodb_client.create_table(
        TableName='app_test_tasks',
        KeySchema=[
            {'AttributeName': 'task_id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'task_id', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )
    return 'app_test_tasks'


@pytest.fixture
def project_tasks_table(mock_dynamodb_client):
    """Create a hash + range tasks table and return its name."""
    mock_dynamodb_client.create_table(
        TableName='app_test_project_tasks',
        KeySchema=[
            {'AttributeName': 'task_id', 'KeyType': 'HASH'},
            {'AttributeName': 'project_id', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'task_id', 'AttributeType': 'S'},
            {'AttributeName': 'project_id', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )
    return 'app_test_project_tasks'


@pytest.fixture
def async_dynamodb_client(mock_dynamodb_client):
    """Async store client over the moto-backed boto3 client."""
    return AsyncClientAdapter(mock_dynamodb_client)
