"""Main OpenAPI nullable fixer implementation."""

import logging
from pathlib import Path
from typing import Optional, Union
from .types import NullableFixerInterface, FixResult, RewriteResult
from .parser import JSONParser
from .rewriter import SchemaRewriter
from .error_handler import ErrorHandler
from .io import FileReader, FileWriter


class NullableFixer(NullableFixerInterface):
    """
    Main implementation of the nullable fixer interface.

    Reads an OpenAPI document, rewrites its ``anyOf`` null unions into
    ``nullable: true`` schemas and writes the result back.
    """

    def __init__(self, indent: int = 2, encoding: str = "utf-8",
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the fixer.

        Args:
            indent: Indentation used when serializing the document
            encoding: Text encoding of input and output files
            logger: Optional logger instance
        """
        self.indent = indent
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.rewriter = SchemaRewriter(self.logger)
        self.file_reader = FileReader(encoding, self.logger)
        self.file_writer = FileWriter(encoding, self.logger)

    def fix_string(self, json_string: str) -> str:
        """
        Rewrite a JSON document given as text.

        Args:
            json_string: Document text

        Returns:
            Rewritten document text

        Raises:
            ValueError: If the text is not valid JSON
        """
        return self.parser.serialize(self._rewrite_text(json_string).document, self.indent)

    def fix_file(self, path: Union[str, Path]) -> FixResult:
        """
        Rewrite a JSON document file in place.

        Args:
            path: Path of the document; it is overwritten with the result

        Returns:
            FixResult with operation details

        Raises:
            ProcessingError: If the file cannot be read or written
            ValueError: If the file does not contain valid JSON
        """
        self.logger.info(f"Fixing nullable unions in {path}")

        json_string = self.file_reader.read_document(path)
        result = self._rewrite_text(json_string)
        output = self.parser.serialize(result.document, self.indent)
        bytes_written = self.file_writer.write_document(path, output)

        return FixResult(
            path=str(path),
            merged_count=result.merged_count,
            merged_paths=result.merged_paths,
            bytes_written=bytes_written
        )

    def _rewrite_text(self, json_string: str) -> RewriteResult:
        document = self.parser.parse(json_string)
        return self.rewriter.rewrite(document)
