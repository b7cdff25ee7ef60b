"""Custom exceptions for the document context."""

from pathlib import Path
from typing import Optional


class InvalidResumeInputError(ValueError):
    """
    Exception raised when imported resume content cannot be parsed at all.

    Shape problems never raise (the normalizer absorbs them); this covers the
    step before normalization, when a file is not valid JSON or YAML.

    Attributes:
        message: Error description
        source_path: File the content came from, if any
        original_error: The parser error
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.original_error = original_error

        parts = [message]

        if source_path:
            parts.append(f"Source: {source_path}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
