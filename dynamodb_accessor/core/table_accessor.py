"""
Schema-enforcing DynamoDB Table Accessor

TableAccessor binds one table (name plus key shape) to one Pydantic record
model and exposes four point operations:

- find:   GetItem with optional projection
- save:   PutItem of a full, validated record
- update: UpdateItem with a generated SET expression, returning ALL_NEW
- remove: DeleteItem

Every operation validates the caller's key and payload before touching the
network, and then awaits exactly one store call. Nothing is retried: errors
raised by the store client propagate unchanged.

Example:
    class Note(BaseModel):
        id: str
        text: str
        completed: bool = False

    notes = TableAccessor(client, Note, TableConfig(table_name="notes", hash_key="id"))
    await notes.save({"id": "n-1", "text": "hello"})
    note = await notes.update({"id": "n-1"}, {"completed": True})
"""

import logging
from typing import Any, Dict, Generic, Mapping, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel

from ..config import DynamoDBConfig
from ..exceptions import (
    ItemNotFoundError,
    SchemaViolationError,
    UpdateFailedError,
)
from ..models import TableConfig
from .expressions import build_projection_expression, build_update_expression
from .key_validator import build_key, validate_key
from .marshalling import marshal, unmarshal
from .schema import RecordSchema

T = TypeVar('T', bound=BaseModel)

logger = logging.getLogger(__name__)


class TableAccessor(Generic[T]):
    """
    Typed access to a single DynamoDB table.

    Holds no mutable state beyond the client, schema and table config bound
    at construction, so one instance can serve concurrent callers.
    """

    def __init__(self, client: Any, schema: Type[T], table_config: TableConfig):
        """Initialize table accessor.

        Args:
            client: Async DynamoDB low-level client (aiobotocore)
            schema: Pydantic model describing a full record
            table_config: Table name and key shape
        """
        self.client = client
        self.schema = RecordSchema(schema)
        self.table_config = table_config

    @property
    def table_name(self) -> str:
        """Return the DynamoDB table name."""
        return self.table_config.table_name

    def _wire_key(self, query: Mapping[str, Any]) -> Dict[str, Any]:
        hash_value, range_value = validate_key(query, self.table_config)
        return marshal(build_key(self.table_config, hash_value, range_value))

    async def find(
        self,
        query: Mapping[str, Any],
        projection: Optional[Sequence[str]] = None
    ) -> Union[T, Dict[str, Any]]:
        """
        Get one item by key.

        DynamoDB Operation: GetItem

        Args:
            query: Key mapping, hash attribute first
            projection: Field names or aliases to read; all attributes when omitted

        Returns:
            Validated model instance, or a dict of the validated projected
            attributes when a projection is given

        Raises:
            InvalidKeyError: Query does not match the table's key shape
            ItemNotFoundError: No item for the key
            SchemaViolationError: Stored item does not match the schema
        """
        key = self._wire_key(query)

        get_kwargs = {
            'TableName': self.table_name,
            'Key': key,
        }
        projection_expression, projection_names = build_projection_expression(
            [self.schema.attribute_name(name) for name in projection or ()]
        )
        if projection_expression is not None:
            get_kwargs['ProjectionExpression'] = projection_expression
            get_kwargs['ExpressionAttributeNames'] = projection_names

        response = await self.client.get_item(**get_kwargs)
        # An existing item without any projected attribute comes back as {}
        item = response.get('Item')
        if item is None:
            raise ItemNotFoundError(self.table_name, key)

        logger.debug(f"Read item from {self.table_name}: {key}")
        record = unmarshal(item)
        if projection_expression is not None:
            return self.schema.validate_partial(record)
        return self.schema.validate(record)

    async def save(self, record: Union[T, Mapping[str, Any]]) -> T:
        """
        Put a full record, replacing any existing item with the same key.

        DynamoDB Operation: PutItem (no condition)

        Args:
            record: Mapping or model instance

        Returns:
            The validated record; the table is not read back

        Raises:
            SchemaViolationError: Record does not match the schema
        """
        validated = self.schema.validate(record)
        item = marshal(self.schema.dump(validated))

        await self.client.put_item(TableName=self.table_name, Item=item)
        logger.info(f"Put item in {self.table_name}: {item}")
        return validated

    async def update(self, query: Mapping[str, Any], patch: Mapping[str, Any]) -> T:
        """
        Set the attributes in ``patch`` on an existing item.

        DynamoDB Operation: UpdateItem with ReturnValues=ALL_NEW

        The patch is validated attribute by attribute; it is never checked
        against the full schema, which would reject legitimate partial
        updates. The item returned by DynamoDB is validated in full.

        Args:
            query: Key mapping, hash attribute first
            patch: Attributes to set; non-empty, no key attributes

        Returns:
            The updated record

        Raises:
            InvalidKeyError: Query does not match the table's key shape
            SchemaViolationError: Invalid patch or invalid stored item
            UpdateFailedError: DynamoDB did not return the updated item
        """
        key = self._wire_key(query)
        self._check_patch_shape(patch)

        validated_patch = self.schema.validate_partial(patch)
        self._check_patch_keys(validated_patch)
        update = build_update_expression(marshal(self.schema.dump_partial(validated_patch)))

        response = await self.client.update_item(
            TableName=self.table_name,
            Key=key,
            UpdateExpression=update.expression,
            ExpressionAttributeNames=update.attribute_names,
            ExpressionAttributeValues=update.attribute_values,
            ReturnValues='ALL_NEW'
        )
        attributes = response.get('Attributes')
        if not attributes:
            raise UpdateFailedError(self.table_name, key)

        logger.info(f"Updated item in {self.table_name}: {key}")
        return self.schema.validate(unmarshal(attributes))

    async def remove(self, query: Mapping[str, Any]) -> None:
        """
        Delete one item by key. Deleting a missing item is not an error.

        DynamoDB Operation: DeleteItem

        Raises:
            InvalidKeyError: Query does not match the table's key shape
        """
        key = self._wire_key(query)

        await self.client.delete_item(TableName=self.table_name, Key=key)
        logger.info(f"Deleted item from {self.table_name}: {key}")

    def _check_patch_shape(self, patch: Mapping[str, Any]) -> None:
        if not patch:
            raise SchemaViolationError(
                "Update patch cannot be empty",
                errors=[{'type': 'empty_patch', 'loc': (), 'msg': 'At least one attribute is required', 'input': {}}]
            )

    def _check_patch_keys(self, patch: Mapping[str, Any]) -> None:
        key_errors = [
            {'type': 'key_attribute', 'loc': (name,), 'msg': 'Key attributes cannot be updated', 'input': patch[name]}
            for name in self.table_config.key_attributes
            if name in patch
        ]
        if key_errors:
            raise SchemaViolationError("Update patch cannot change key attributes", errors=key_errors)


def create_table_accessor(
    client: Any,
    schema: Type[T],
    base_table_name: str,
    hash_key: str,
    range_key: Optional[str] = None,
    config: Optional[DynamoDBConfig] = None,
    include_range_in_key: bool = False
) -> TableAccessor[T]:
    """
    Factory function to create a TableAccessor instance.

    Args:
        client: Async DynamoDB low-level client
        schema: Pydantic record model
        base_table_name: Table name (prefixed via config.get_table_name() when a config is given)
        hash_key: Hash attribute name
        range_key: Range attribute name, if any
        config: Optional configuration used for table naming
        include_range_in_key: Send the range attribute in lookup keys

    Returns:
        Configured TableAccessor instance
    """
    table_name = config.get_table_name(base_table_name) if config else base_table_name
    table_config = TableConfig(
        table_name=table_name,
        hash_key=hash_key,
        range_key=range_key,
        include_range_in_key=include_range_in_key
    )
    return TableAccessor(client, schema, table_config)

