"""Utility functions for the OpenAPI nullable fixer."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
