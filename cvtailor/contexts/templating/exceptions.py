"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional


class InvalidCVStructureError(ValueError):
    """
    Exception raised when a CV file or dict does not match the expected structure.

    Attributes:
        message: Error description
        field_path: Dotted path of the offending field (e.g., 'work_experience[0].job_start')
        source_path: File the CV was loaded from, when known
    """

    def __init__(
        self,
        message: str,
        field_path: Optional[str] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.field_path = field_path
        self.source_path = source_path

        parts = [message]

        if field_path:
            parts.append(f"Field: {field_path}")

        if source_path:
            parts.append(f"File: {source_path}")

        super().__init__("\n".join(parts))
