# Base exception class
from .base import DynamoDBAccessorError

# Domain-specific exceptions
from .domain_exceptions import (
    ConnectionError,
    InvalidKeyError,
    ItemNotFoundError,
    SchemaViolationError,
    UpdateFailedError,
)

__all__ = [
    # Base exception
    "DynamoDBAccessorError",

    # Domain exceptions (alphabetically ordered)
    "ConnectionError",
    "InvalidKeyError",
    "ItemNotFoundError",
    "SchemaViolationError",
    "UpdateFailedError",
]
