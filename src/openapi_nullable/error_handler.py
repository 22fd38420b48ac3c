"""Error handling implementation for the OpenAPI nullable fixer."""

import logging
from typing import Optional
from .types import ValidationResult, ValidationError, ErrorType
from .utils.validation import ValidationUtils


class ErrorHandler:
    """
    Input validation front door for document processing.

    Wraps ValidationUtils so that every validation failure is logged
    and unexpected validator failures come back as a failed result.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            result = ValidationUtils.validate_json_string(input_data)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

        for error in result.errors:
            self.logger.error(f"Validation error ({error.type.value}) at {error.location}: {error.message}")
        for warning in result.warnings:
            self.logger.warning(warning)

        return result
