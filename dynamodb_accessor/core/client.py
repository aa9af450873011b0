"""
Async DynamoDB client construction.

The accessor talks to DynamoDB through an aiobotocore low-level client. This
module builds one from DynamoDBConfig, carrying the connection pool, retry
and timeout settings into botocore. Retries and timeouts therefore live in
botocore, not in the accessor.

Example:
    async with create_dynamodb_client(config) as client:
        notes = TableAccessor(client, Note, TableConfig(table_name="notes", hash_key="id"))
        await notes.find({"id": "n-1"})
"""

import logging

import aiobotocore.session

from ..config import DynamoDBConfig
from ..exceptions import ConnectionError

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "dynamodb_accessor"


def create_dynamodb_client(config: DynamoDBConfig):
    """Create an aiobotocore DynamoDB client context manager.

    Args:
        config: DynamoDB configuration

    Returns:
        Async context manager yielding the low-level DynamoDB client

    Raises:
        ConnectionError: If the session or client cannot be created
    """
    if config.enable_debug_logging:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)

    try:
        session = aiobotocore.session.get_session()
        client = session.create_client('dynamodb', **config.client_kwargs())
        logger.debug(f"Created DynamoDB client for region {config.region_name}")
        return client
    except Exception as e:
        logger.error(f"Failed to create DynamoDB client: {e}")
        raise ConnectionError(
            f"Failed to create DynamoDB client: {e}",
            e,
            {'region_name': config.region_name, 'endpoint_url': config.endpoint_url}
        ) from e
