"""
Shared utilities for CVTAILOR.

Common functionality used across contexts:
- Text normalization
- Report/table formatting
- Logger setup
- Timestamps
"""

from cvtailor.utils.text_processing import normalize_reference_text, truncate_display
from cvtailor.utils.timestamp import now

__all__ = ["normalize_reference_text", "truncate_display", "now"]
