"""Rewriting of ``anyOf`` null unions into ``nullable: true`` schemas."""

import logging
from typing import Any, List, Optional
from .types import JSONValue, RewriteResult, SchemaRewriterInterface
from .utils.validation import ValidationUtils


class SchemaRewriter(SchemaRewriterInterface):
    """
    Recursive rewriter for generator-style nullable unions.

    A schema such as ``{"anyOf": [{"type": "null"}, {"type": "string"}]}``
    becomes ``{"type": "string", "nullable": true}``. Keys that sit next
    to ``anyOf`` are copied onto the merged schema and win over keys of
    the concrete member.

    Only mapping values are walked. Lists are returned as they are, so
    unions nested inside array elements are left alone.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the schema rewriter.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def rewrite(self, document: JSONValue) -> RewriteResult:
        """
        Rewrite every nullable union reachable from the document root.

        Args:
            document: Parsed JSON document; nested mappings are updated in place

        Returns:
            RewriteResult with the rewritten document and the JSON pointer
            of every merged node
        """
        merged_paths: List[str] = []
        result = self._fix_node(document, "", merged_paths)

        self.logger.info(f"Rewrote {len(merged_paths)} nullable unions")
        return RewriteResult(document=result, merged_paths=merged_paths)

    def _fix_node(self, node: Any, path: str, merged_paths: List[str]) -> Any:
        if not isinstance(node, dict):
            return node

        null_index = ValidationUtils.null_branch_index(node)
        if null_index is not None:
            other = node["anyOf"][1 - null_index]

            merged = dict(other)
            merged["nullable"] = True
            for key, value in node.items():
                if key != "anyOf":
                    merged[key] = value

            merged_paths.append(path)
            self.logger.debug(f"Merged nullable union at '{path or '/'}'")

            # The merged node may itself hold another union taken from `other`.
            return self._fix_node(merged, path, merged_paths)

        for key in node:
            node[key] = self._fix_node(node[key], f"{path}/{_escape_pointer(key)}", merged_paths)

        return node


def _escape_pointer(key: str) -> str:
    """Escape a mapping key as a JSON pointer reference token."""
    return str(key).replace("~", "~0").replace("/", "~1")


def fix_schema(value: JSONValue) -> JSONValue:
    """
    Rewrite nullable ``anyOf`` unions in a JSON value.

    Non-mapping values, lists included, are returned unchanged.
    """
    return SchemaRewriter().rewrite(value).document
