"""
DynamoDB Accessor

Typed, schema-enforcing access to a single DynamoDB table using aiobotocore
and Pydantic. Keys are checked against the table's declared key shape and
payloads against the record model before any request is sent.
"""

from .config import DynamoDBConfig
from .exceptions import (
    ConnectionError,
    DynamoDBAccessorError,
    InvalidKeyError,
    ItemNotFoundError,
    SchemaViolationError,
    UpdateFailedError,
)
from .models import TableConfig
from .core import (
    # Accessor
    TableAccessor,
    create_table_accessor,
    create_dynamodb_client,
    # Building blocks
    RecordSchema,
    UpdateExpression,
    build_projection_expression,
    build_update_expression,
    marshal,
    unmarshal,
    validate_key,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",
    "TableConfig",

    # Exceptions
    "ConnectionError",
    "DynamoDBAccessorError",
    "InvalidKeyError",
    "ItemNotFoundError",
    "SchemaViolationError",
    "UpdateFailedError",

    # Accessor
    "TableAccessor",
    "create_table_accessor",
    "create_dynamodb_client",

    # Building blocks
    "RecordSchema",
    "UpdateExpression",
    "build_projection_expression",
    "build_update_expression",
    "marshal",
    "unmarshal",
    "validate_key",
]
