"""Core type definitions for the OpenAPI nullable fixer."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    FILESYSTEM = "filesystem"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class RewriteResult:
    """Result of rewriting a parsed document."""
    document: JSONValue
    merged_paths: List[str] = field(default_factory=list)

    @property
    def merged_count(self) -> int:
        """Number of nullable unions merged into their concrete schema."""
        return len(self.merged_paths)


@dataclass
class FixResult:
    """Result of fixing a document file in place."""
    path: str
    merged_count: int
    merged_paths: List[str] = field(default_factory=list)
    bytes_written: int = 0


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class SchemaRewriterInterface(ABC):
    """Abstract interface for the schema rewriter."""

    @abstractmethod
    def rewrite(self, document: JSONValue) -> RewriteResult:
        """Rewrite every nullable union reachable from the document root."""
        pass


class NullableFixerInterface(ABC):
    """Abstract interface for the document fixer."""

    @abstractmethod
    def fix_string(self, json_string: str) -> str:
        """Rewrite a JSON document given as text and return the new text."""
        pass

    @abstractmethod
    def fix_file(self, path: Union[str, Path]) -> FixResult:
        """Rewrite a JSON document file in place."""
        pass
