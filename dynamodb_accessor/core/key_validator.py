"""
Key validation for point operations.

A query is an ordered mapping. Its first (name, value) pair is the primary
attribute the caller intends to look up by; any further pairs are only
consulted for the range attribute, so callers may pass extra unrelated
attributes in the same mapping.
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from ..exceptions import InvalidKeyError
from ..models import TableConfig


def validate_key(query: Mapping[str, Any], config: TableConfig) -> Tuple[Any, Optional[Any]]:
    """Check a query against the table's declared key shape.

    Args:
        query: Caller-supplied key mapping, primary attribute first
        config: Table identity and key shape

    Returns:
        Tuple of (hash value, range value or None)

    Raises:
        InvalidKeyError: The first attribute is not the hash key, or the table
            has a range key and the query carries no truthy value for it
    """
    primary = next(iter(query.items()), None)
    if primary is None or primary[0] != config.hash_key:
        raise InvalidKeyError(config.table_name, config.hash_key, query)

    range_value = None
    if config.range_key is not None:
        range_value = query.get(config.range_key)
        if not range_value:
            raise InvalidKeyError(config.table_name, config.range_key, query)

    return primary[1], range_value


def build_key(config: TableConfig, hash_value: Any, range_value: Optional[Any] = None) -> Dict[str, Any]:
    """Build the native lookup key for a validated query.

    Only the hash attribute is used unless the table opts into sending the
    range attribute too.
    """
    key = {config.hash_key: hash_value}
    if config.include_range_in_key and config.range_key is not None and range_value is not None:
        key[config.range_key] = range_value
    return key
