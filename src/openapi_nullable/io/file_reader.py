"""File reader for OpenAPI documents."""

import logging
from pathlib import Path
from typing import Optional, Union
from ..types import ProcessingError, ErrorType


class FileReader:
    """Reads document files as text."""

    def __init__(self, encoding: str = "utf-8", logger: Optional[logging.Logger] = None):
        """
        Initialize the file reader.

        Args:
            encoding: Text encoding of the document files
            logger: Optional logger instance
        """
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    def read_document(self, path: Union[str, Path]) -> str:
        """
        Read a document file.

        Args:
            path: Path of the file to read

        Returns:
            File contents as text

        Raises:
            ProcessingError: If the file cannot be read or decoded
        """
        file_path = Path(path)
        try:
            content = file_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ProcessingError(
                f"Failed to read {file_path}: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"path": str(file_path)}
            ) from e

        self.logger.debug(f"Read {len(content)} characters from {file_path}")
        return content
