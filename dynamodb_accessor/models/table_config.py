from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TableConfig(BaseModel):
    """Identity and key shape of the DynamoDB table an accessor works on.

    Bound once when the accessor is built and never mutated afterwards.
    """

    table_name: str = Field(..., description="Physical DynamoDB table name")
    hash_key: str = Field(..., description="Partition (hash) key attribute name")
    range_key: Optional[str] = Field(None, description="Sort (range) key attribute name, if the table has one")

    # Lookups send only the hash attribute unless this is switched on
    include_range_in_key: bool = Field(
        False,
        description="Send the range attribute as part of the lookup key"
    )

    model_config = ConfigDict(
        frozen=True
    )

    @field_validator('table_name', 'hash_key')
    @classmethod
    def validate_required_name(cls, v):
        """Validate that required names are non-empty."""
        if not v or not v.strip():
            raise ValueError("Table name and hash key must be non-empty")
        return v

    @field_validator('range_key')
    @classmethod
    def validate_range_key(cls, v):
        """Validate that the range key, when given, is non-empty."""
        if v is not None and not v.strip():
            raise ValueError("Range key must be non-empty when provided")
        return v

    @model_validator(mode='after')
    def validate_distinct_keys(self):
        """Validate that the hash and range attributes differ."""
        if self.range_key is not None and self.range_key == self.hash_key:
            raise ValueError(f"Range key must differ from hash key '{self.hash_key}'")
        return self

    @property
    def key_attributes(self) -> Tuple[str, ...]:
        """Key attribute names, hash first."""
        if self.range_key is None:
            return (self.hash_key,)
        return (self.hash_key, self.range_key)
