"""
Domain-Specific Exceptions for the DynamoDB Accessor

Every failure the accessor raises on its own is one of the classes below.
Each carries the request context as attributes, so callers can branch on the
exception type and inspect the table, key or violations without parsing
messages.

Organized by category:
1. Key Errors (raised before any network call)
2. Schema Errors
3. Store Result Errors (raised after a successful network call)
4. Infrastructure Errors

Transport errors raised by botocore are never wrapped by these classes.
"""

from typing import Any, Dict, List, Mapping, Optional

from .base import DynamoDBAccessorError


# =============================================================================
# Key Errors
# =============================================================================

class InvalidKeyError(DynamoDBAccessorError):
    """Raised when a query does not match the table's declared key shape.

    Used for:
    - A query whose first attribute is not the table's hash attribute
    - A range-keyed table queried without a value for the range attribute
    - An empty query
    """

    def __init__(self, table_name: str, expected_key: str, query: Mapping[str, Any]):
        """Initialize invalid key error.

        Args:
            table_name: Name of the DynamoDB table
            expected_key: The key attribute the query failed to provide
            query: The query exactly as the caller supplied it
        """
        self.table_name = table_name
        self.expected_key = expected_key
        self.query = dict(query)
        message = f"Invalid key for table '{table_name}': expected '{expected_key}', got {self.query}"
        context = {
            'table_name': table_name,
            'expected_key': expected_key,
        }
        super().__init__(message, None, context)


# =============================================================================
# Schema Errors
# =============================================================================

class SchemaViolationError(DynamoDBAccessorError):
    """Raised when a record or patch fails schema validation.

    Used for:
    - Records passed to save() that do not satisfy the schema
    - Update patches with unknown, key or ill-typed attributes
    - Items read back from the table that no longer satisfy the schema
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None, original_error: Optional[Exception] = None):
        """Initialize schema violation error.

        Args:
            message: Human-readable error message
            errors: Field-level violations (pydantic error dicts)
            original_error: The original exception that caused this error
        """
        self.errors = errors or []
        context = {
            'violations': [_describe_violation(error) for error in self.errors]
        }
        super().__init__(message, original_error, context)

    @property
    def fields(self) -> List[str]:
        """Dotted paths of the failing fields, in error order."""
        return [".".join(str(part) for part in error.get('loc', ())) for error in self.errors]


def _describe_violation(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get('loc', ())) or "<root>"
    return f"{location}: {error.get('msg', 'invalid')}"


# =============================================================================
# Store Result Errors
# =============================================================================

class ItemNotFoundError(DynamoDBAccessorError):
    """Raised when a point read finds no item for the key."""

    def __init__(self, table_name: str, key: dict, original_error: Optional[Exception] = None):
        """Initialize item not found error.

        Args:
            table_name: Name of the DynamoDB table
            key: The wire-encoded key that was looked up
            original_error: The original exception that caused this error
        """
        self.table_name = table_name
        self.key = key
        message = f"Item not found in table '{table_name}' with key: {key}"
        context = {
            'table_name': table_name,
            'key': key
        }
        super().__init__(message, original_error, context)


class UpdateFailedError(DynamoDBAccessorError):
    """Raised when UpdateItem succeeds but does not return the updated item.

    This signals a store-side contract violation, or an item that vanished
    between validation and write. The accessor never retries it.
    """

    def __init__(self, table_name: str, key: dict):
        """Initialize update failed error.

        Args:
            table_name: Name of the DynamoDB table
            key: The wire-encoded key that was updated
        """
        self.table_name = table_name
        self.key = key
        message = f"Update on table '{table_name}' did not return the updated item"
        context = {
            'table_name': table_name,
            'key': key
        }
        super().__init__(message, None, context)


# =============================================================================
# Infrastructure Errors
# =============================================================================

class ConnectionError(DynamoDBAccessorError):
    """Raised when a DynamoDB client cannot be created from configuration.

    Used for:
    - Invalid credentials or session configuration
    - Invalid endpoint configurations
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        """Initialize connection error.

        Args:
            message: Human-readable error message
            original_error: The original exception that caused this error
            context: Additional context information (e.g., endpoint, region)
        """
        super().__init__(message, original_error, context)
