"""
Record <-> DynamoDB wire item conversion.

Built on boto3's TypeSerializer/TypeDeserializer. DynamoDB numbers travel as
Decimal: floats are converted on the way out, and numbers coming back are
returned as int when integral and float otherwise, so that a JSON-compatible
record survives a marshal/unmarshal round trip unchanged. Datetimes, enums
and UUIDs are stored as strings and parsed back by the schema.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping
from uuid import UUID

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def _to_dynamo_value(obj: Any) -> Any:
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, Enum):
        return _to_dynamo_value(obj.value)
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, UUID):
        return str(obj)
    if isinstance(obj, Mapping):
        return {k: _to_dynamo_value(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_dynamo_value(item) for item in obj]
    if isinstance(obj, (set, frozenset)):
        return {_to_dynamo_value(item) for item in obj}
    return obj


def _from_dynamo_value(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    if isinstance(obj, dict):
        return {k: _from_dynamo_value(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_from_dynamo_value(item) for item in obj]
    if isinstance(obj, set):
        return {_from_dynamo_value(item) for item in obj}
    return obj


def marshal_value(value: Any) -> Dict[str, Any]:
    """Encode a single native value as a DynamoDB attribute value."""
    return _serializer.serialize(_to_dynamo_value(value))


def marshal(record: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Encode a record as a DynamoDB wire item.

    Example:
        >>> marshal({'id': 'a', 'count': 2})
        {'id': {'S': 'a'}, 'count': {'N': '2'}}
    """
    return {name: marshal_value(value) for name, value in record.items()}


def unmarshal(item: Mapping[str, Dict[str, Any]]) -> Dict[str, Any]:
    """Decode a DynamoDB wire item into a native record."""
    return {name: _from_dynamo_value(_deserializer.deserialize(value)) for name, value in item.items()}
