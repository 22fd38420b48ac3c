"""Tests for validation utilities."""

import pytest
from openapi_nullable.utils.validation import ValidationUtils
from openapi_nullable.types import ErrorType


class TestValidationUtils:
    """Tests for ValidationUtils class."""

    def test_validate_valid_json(self):
        """Test validation of valid JSON string."""
        json_string = '{"openapi": "3.0.3", "paths": {}}'
        result = ValidationUtils.validate_json_string(json_string)

        assert result.is_valid
        assert len(result.errors) == 0
        assert len(result.warnings) == 0

    def test_validate_empty_json(self):
        """Test validation of empty JSON string."""
        result = ValidationUtils.validate_json_string("   \n")

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "empty" in result.errors[0].message.lower()

    def test_validate_invalid_json_syntax(self):
        """Test validation of invalid JSON syntax."""
        json_string = '{"paths": {"/a": {}}'  # Missing closing brace
        result = ValidationUtils.validate_json_string(json_string)

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "syntax" in result.errors[0].message.lower()
        assert result.errors[0].location.startswith("line 1")

    def test_validate_primitive_root(self):
        """Test that a primitive root is accepted with a warning."""
        result = ValidationUtils.validate_json_string('"just a string"')

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "not an object" in result.warnings[0]

    def test_validate_list_root(self):
        """Test that a list root is accepted with a warning."""
        result = ValidationUtils.validate_json_string('[{"anyOf": []}]')

        assert result.is_valid
        assert "list" in result.warnings[0]

    @pytest.mark.parametrize("json_string", [
        '{"default": NaN}',
        '{"maximum": Infinity}',
        '[-Infinity]',
    ])
    def test_validate_non_standard_constants(self, json_string):
        """Test that NaN and Infinity literals are syntax errors."""
        result = ValidationUtils.validate_json_string(json_string)

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "Non-standard JSON constant" in result.errors[0].message


class TestNullableUnionDetection:
    """Tests for nullable union detection."""

    @pytest.mark.parametrize("node, expected", [
        ({"anyOf": [{"type": "null"}, {"type": "string"}]}, 0),
        ({"anyOf": [{"type": "string"}, {"type": "null"}]}, 1),
        ({"anyOf": [{"type": "null"}, {"type": "null"}]}, 0),
        ({"anyOf": [{"type": "string"}, {"type": "integer"}]}, None),
        ({"anyOf": [{"type": "null"}]}, None),
        ({"anyOf": [{"type": "null"}, {}, {}]}, None),
        ({"anyOf": [{"type": "null"}, None]}, None),
        ({"anyOf": {"type": "null"}}, None),
        ({"oneOf": [{"type": "null"}, {"type": "string"}]}, None),
        ({"anyOf": [{"type": ["null"]}, {"type": "string"}]}, None),
        ([{"type": "null"}, {"type": "string"}], None),
        (None, None),
    ])
    def test_null_branch_index(self, node, expected):
        """Test locating the null member of a union."""
        assert ValidationUtils.null_branch_index(node) == expected
