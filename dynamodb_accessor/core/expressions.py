"""
DynamoDB expression builders.

Both builders are pure: they take already wire-encoded input and return new
structures, so the same input always yields the same request parameters.
"""

from typing import Any, Dict, NamedTuple, Optional, Sequence, Tuple


class UpdateExpression(NamedTuple):
    """UpdateItem parameters generated from a patch.

    The three members are co-indexed: every ``#attr`` in ``expression`` has an
    entry in ``attribute_names`` and its ``:attr`` an entry in
    ``attribute_values``.
    """

    expression: str
    attribute_names: Dict[str, str]
    attribute_values: Dict[str, Any]


def build_update_expression(patch: Dict[str, Any]) -> UpdateExpression:
    """Turn a wire-encoded patch into a SET update expression.

    Args:
        patch: Attribute name to wire-encoded value; must not be empty

    Returns:
        UpdateExpression, e.g. ``SET #a = :a, #b = :b``

    Raises:
        ValueError: If the patch is empty

    Example:
        >>> build_update_expression({'a': {'N': '1'}}).expression
        'SET #a = :a'
    """
    if not patch:
        raise ValueError("Update patch cannot be empty")

    update_parts = []
    expression_names = {}
    expression_values = {}

    for key, value in patch.items():
        attr_name = f"#{key}"
        attr_value = f":{key}"
        update_parts.append(f"{attr_name} = {attr_value}")
        expression_names[attr_name] = key
        expression_values[attr_value] = value

    return UpdateExpression(
        expression="SET " + ", ".join(update_parts),
        attribute_names=expression_names,
        attribute_values=expression_values,
    )


def build_projection_expression(
    attributes: Optional[Sequence[str]]
) -> Tuple[Optional[str], Optional[Dict[str, str]]]:
    """Build a ProjectionExpression with ExpressionAttributeNames.

    Every attribute gets a positional ``#f<i>`` placeholder, so reserved
    words such as ``status`` or ``name`` can be projected. Order and
    duplicates are kept.

    Returns:
        Tuple of (ProjectionExpression, ExpressionAttributeNames), or
        (None, None) when there is nothing to project

    Example:
        >>> build_projection_expression(['task_id', 'status'])
        ('#f0, #f1', {'#f0': 'task_id', '#f1': 'status'})
    """
    if not attributes:
        return None, None

    expression_names = {}
    projection_parts = []

    for i, attribute in enumerate(attributes):
        attr_name = f"#f{i}"
        expression_names[attr_name] = attribute
        projection_parts.append(attr_name)

    return ", ".join(projection_parts), expression_names
