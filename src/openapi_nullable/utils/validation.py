"""Validation utilities for document text and schema nodes."""

import json
from typing import Any, Optional
from ..types import ValidationResult, ValidationError, ErrorType


NULL_TYPE = "null"


def reject_constant(name: str) -> Any:
    """Reject the NaN and Infinity literals the json module accepts by default."""
    raise ValueError(f"Non-standard JSON constant: {name}")


class ValidationUtils:
    """Utility class for validating input documents and schema shapes."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax.

        Any root type is accepted; only empty input and syntax errors
        are reported.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            data = json.loads(json_string, parse_constant=reject_constant)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not isinstance(data, dict):
            warnings.append(
                f"Root element is {type(data).__name__}, not an object; "
                "the document will be written back unchanged."
            )

        return ValidationResult(
            is_valid=True,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def null_branch_index(node: Any) -> Optional[int]:
        """
        Locate the null branch of a two-member ``anyOf`` union.

        Args:
            node: Schema node to inspect

        Returns:
            Index of the first ``{"type": "null"}`` member, or None when
            the node is not a nullable union
        """
        if not isinstance(node, dict):
            return None

        members = node.get("anyOf")
        if not isinstance(members, list) or len(members) != 2:
            return None
        if not all(isinstance(member, dict) for member in members):
            return None

        for index, member in enumerate(members):
            if member.get("type") == NULL_TYPE:
                return index
        return None
