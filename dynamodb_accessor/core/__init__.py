"""
Core components for schema-enforced DynamoDB access.

This module contains:
- TableAccessor: find/save/update/remove against one table and one schema
- Key validation and lookup-key building
- Update and projection expression builders
- Record <-> wire item marshalling
- Async client factory
"""

from .client import create_dynamodb_client
from .expressions import UpdateExpression, build_projection_expression, build_update_expression
from .key_validator import build_key, validate_key
from .marshalling import marshal, marshal_value, unmarshal
from .schema import RecordSchema
from .table_accessor import TableAccessor, create_table_accessor

__all__ = [
    "RecordSchema",
    "TableAccessor",
    "UpdateExpression",
    "build_key",
    "build_projection_expression",
    "build_update_expression",
    "create_dynamodb_client",
    "create_table_accessor",
    "marshal",
    "marshal_value",
    "unmarshal",
    "validate_key",
]
