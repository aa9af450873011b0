"""
Tests for expression builders (core/expressions.py)
"""

import pytest

from dynamodb_accessor.core.expressions import (
    UpdateExpression,
    build_projection_expression,
    build_update_expression,
)
from dynamodb_accessor.core.marshalling import marshal


class TestBuildUpdateExpression:
    """Test build_update_expression()."""

    def test_two_attributes(self):
        """Test the canonical two-attribute patch."""
        result = build_update_expression(marshal({'a': 1, 'b': 'x'}))

        assert result.expression == "SET #a = :a, #b = :b"
        assert result.attribute_names == {'#a': 'a', '#b': 'b'}
        assert result.attribute_values == {':a': {'N': '1'}, ':b': {'S': 'x'}}

    def test_single_attribute_has_no_separator(self):
        """Test that a single attribute produces no trailing comma."""
        result = build_update_expression({'owner': {'S': 'digui'}})

        assert result.expression == "SET #owner = :owner"
        assert result.attribute_names == {'#owner': 'owner'}
        assert result.attribute_values == {':owner': {'S': 'digui'}}

    def test_placeholders_are_co_indexed(self):
        """Test that every placeholder in the expression resolves in both maps."""
        patch = marshal({'z': True, 'm': 2.5, 'a': {'nested': 'map'}})

        result = build_update_expression(patch)

        assignments = result.expression[len("SET "):].split(", ")
        assert len(assignments) == 3
        for assignment in assignments:
            name_ref, value_ref = assignment.split(" = ")
            attribute = result.attribute_names[name_ref]
            assert value_ref == f":{attribute}"
            assert result.attribute_values[value_ref] == patch[attribute]

    def test_follows_patch_order(self):
        """Test that attributes appear in patch iteration order."""
        result = build_update_expression({'b': {'S': '1'}, 'a': {'S': '2'}})

        assert result.expression == "SET #b = :b, #a = :a"

    def test_returns_named_tuple(self):
        """Test that the result unpacks into its three members."""
        expression, names, values = build_update_expression({'a': {'S': 'x'}})

        assert isinstance(build_update_expression({'a': {'S': 'x'}}), UpdateExpression)
        assert expression == "SET #a = :a"
        assert names == {'#a': 'a'}
        assert values == {':a': {'S': 'x'}}

    def test_does_not_mutate_patch(self):
        """Test that the input patch is left untouched."""
        patch = {'a': {'S': 'x'}}

        build_update_expression(patch)

        assert patch == {'a': {'S': 'x'}}

    def test_empty_patch_raises(self):
        """Test that an empty patch is rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            build_update_expression({})


class TestBuildProjectionExpression:
    """Test build_projection_expression()."""

    def test_placeholders_in_order(self):
        """Test positional placeholders preserving order."""
        expression, names = build_projection_expression(['text', 'completed'])

        assert expression == "#f0, #f1"
        assert names == {'#f0': 'text', '#f1': 'completed'}

    def test_keeps_duplicates(self):
        """Test that repeated names are not deduplicated."""
        expression, names = build_projection_expression(['a', 'b', 'a'])

        assert expression == "#f0, #f1, #f2"
        assert names == {'#f0': 'a', '#f1': 'b', '#f2': 'a'}

    def test_reserved_words_never_appear_raw(self):
        """Test that reserved words only appear as placeholder values."""
        expression, names = build_projection_expression(['status', 'name', 'data'])

        assert 'status' not in expression
        assert sorted(names.values()) == ['data', 'name', 'status']

    @pytest.mark.parametrize("attributes", [None, [], ()])
    def test_nothing_to_project(self, attributes):
        """Test that absent or empty projections yield no parameters."""
        assert build_projection_expression(attributes) == (None, None)
