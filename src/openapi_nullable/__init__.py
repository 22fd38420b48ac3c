"""
OpenAPI nullable fixer.

Rewrites generator-style ``anyOf`` unions of ``null`` and one concrete
schema into the ``nullable: true`` form, across a whole document.
"""

from .fixer import NullableFixer
from .rewriter import SchemaRewriter, fix_schema
from .types import FixResult, RewriteResult, ProcessingError

__version__ = "1.0.0"
__all__ = [
    "NullableFixer",
    "SchemaRewriter",
    "fix_schema",
    "FixResult",
    "RewriteResult",
    "ProcessingError",
]
