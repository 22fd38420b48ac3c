"""JSON parser and serializer for OpenAPI documents."""

import json
import logging
from typing import Optional
from .types import JSONValue
from .error_handler import ErrorHandler
from .utils.validation import reject_constant


class JSONParser:
    """
    JSON parser with input validation.

    Parses document text into plain Python values and serializes them
    back with stable key order and indentation.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)

    def parse(self, json_string: str) -> JSONValue:
        """
        Parse a JSON string.

        Args:
            json_string: JSON string to parse

        Returns:
            Parsed JSON value

        Raises:
            ValueError: If JSON is invalid
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            raise ValueError(f"Invalid JSON input: {'; '.join(error_messages)}")

        try:
            data = json.loads(json_string, parse_constant=reject_constant)
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}") from e

        self.logger.debug(f"Parsed JSON document with root type {type(data).__name__}")
        return data

    def serialize(self, data: JSONValue, indent: int = 2) -> str:
        """
        Serialize a JSON value to text.

        Args:
            data: JSON value to serialize
            indent: Number of spaces per indentation level

        Returns:
            JSON text without a trailing newline

        Raises:
            ValueError: If the value holds a NaN or infinite float
        """
        return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
