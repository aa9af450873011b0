"""
Schema adapter over a Pydantic model.

Wraps the record model so the accessor can validate whole records, or only
the attributes present in a partial mapping (update patches and projected
reads), and turn validated values back into plain data for marshalling.

Stored attribute names are the fields' aliases where a field declares one,
so items written by save() validate again on read.
"""

from typing import Annotated, Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import SchemaViolationError

T = TypeVar('T', bound=BaseModel)


class RecordSchema(Generic[T]):
    """Validation entry point for one record model."""

    def __init__(self, model_class: Type[T]):
        """Initialize schema adapter.

        Args:
            model_class: Pydantic model describing a full record
        """
        self.model_class = model_class
        self._adapters: Dict[str, TypeAdapter] = {}
        # field name -> stored attribute name
        self._attribute_names = {
            name: field.alias or name for name, field in model_class.model_fields.items()
        }
        # stored attribute name or field name -> field name
        self._field_names = {name: name for name in model_class.model_fields}
        self._field_names.update({attribute: name for name, attribute in self._attribute_names.items()})

    def attribute_name(self, name: str) -> str:
        """Stored attribute name for a field name or alias; unknown names pass through."""
        field_name = self._field_names.get(name)
        if field_name is None:
            return name
        return self._attribute_names[field_name]

    def validate(self, candidate: Any) -> T:
        """Validate a full record.

        Args:
            candidate: Mapping or model instance

        Returns:
            Validated model instance

        Raises:
            SchemaViolationError: With the field-level violations
        """
        if isinstance(candidate, BaseModel):
            candidate = candidate.model_dump(by_alias=True, exclude_unset=True)
        try:
            return self.model_class.model_validate(candidate)
        except PydanticValidationError as e:
            raise SchemaViolationError(
                f"Record does not match schema {self.model_class.__name__}",
                errors=e.errors(include_url=False),
                original_error=e,
            ) from e

    def validate_partial(self, candidate: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate only the attributes present in ``candidate``.

        Attributes may be named by alias or by field name. Each is checked
        against its field's type and constraints. Model-level validators are
        not run, since they may depend on absent attributes.

        Returns:
            Validated values keyed by stored attribute name

        Raises:
            SchemaViolationError: Unknown attributes or invalid values
        """
        errors: List[Dict[str, Any]] = []
        validated: Dict[str, Any] = {}

        for name, value in candidate.items():
            field_name = self._field_names.get(name)
            if field_name is None:
                errors.append({
                    'type': 'extra_forbidden',
                    'loc': (name,),
                    'msg': 'Unknown attribute for this schema',
                    'input': value,
                })
                continue
            attribute = self._attribute_names[field_name]
            try:
                validated[attribute] = self._adapter(field_name).validate_python(value)
            except PydanticValidationError as e:
                for error in e.errors(include_url=False):
                    error['loc'] = (attribute,) + tuple(error['loc'])
                    errors.append(error)

        if errors:
            raise SchemaViolationError(
                f"Partial record does not match schema {self.model_class.__name__}",
                errors=errors,
            )
        return validated

    def dump(self, record: T) -> Dict[str, Any]:
        """Plain data for a validated record.

        Only fields that were set are written, explicit None included, so
        defaults are filled in again on read.
        """
        return record.model_dump(by_alias=True, exclude_unset=True)

    def dump_partial(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """Plain data for values returned by validate_partial."""
        return {
            attribute: self._adapter(self._field_names[attribute]).dump_python(value, by_alias=True, exclude_unset=True)
            for attribute, value in values.items()
        }

    def _adapter(self, field_name: str) -> TypeAdapter:
        adapter: Optional[TypeAdapter] = self._adapters.get(field_name)
        if adapter is None:
            field = self.model_class.model_fields[field_name]
            annotation = field.annotation
            if field.metadata:
                annotation = Annotated[(annotation, *field.metadata)]
            adapter = TypeAdapter(annotation)
            self._adapters[field_name] = adapter
        return adapter
