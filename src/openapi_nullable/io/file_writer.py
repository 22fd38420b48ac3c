"""File writer for rewritten OpenAPI documents."""

import logging
from pathlib import Path
from typing import Optional, Union
from ..types import ProcessingError, ErrorType


class FileWriter:
    """
    File writer for rewritten documents.

    Overwrites the target path with the serialized document text.
    """

    def __init__(self, encoding: str = "utf-8", logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            encoding: Text encoding used for output files
            logger: Optional logger instance
        """
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    def write_document(self, path: Union[str, Path], content: str) -> int:
        """
        Write document text to a file, replacing its contents.

        Args:
            path: Destination file path
            content: Serialized document text

        Returns:
            Number of bytes written

        Raises:
            ProcessingError: If writing fails
        """
        file_path = Path(path)
        data = content.encode(self.encoding)
        try:
            file_path.write_bytes(data)
        except OSError as e:
            raise ProcessingError(
                f"Failed to write {file_path}: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"path": str(file_path), "size": len(data)}
            ) from e

        self.logger.debug(f"Wrote {len(data)} bytes to {file_path}")
        return len(data)
