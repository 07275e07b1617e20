"""
Text processing utilities for word cloud construction and display.
"""


def strip_non_alphabetic(text: str) -> str:
    """
    Delete every character that is neither alphabetic nor whitespace.

    Characters are removed, not replaced, so neighbouring fragments can merge
    (e.g., "e-mail" becomes "email") and symbols vanish entirely
    (e.g., "C++" becomes "C").

    Args:
        text: Arbitrary text

    Returns:
        Text containing only alphabetic and whitespace characters

    Example:
        >>> strip_non_alphabetic("C++ & Python 3.12!")
        'C  Python '
    """
    return "".join(char for char in text if char.isalpha() or char.isspace())


def normalize_reference_text(text: str) -> str:
    """
    Normalize reference text before tokenization.

    Pipeline order:
    1. Trim leading/trailing whitespace
    2. Lowercase
    3. Remove non-alphabetic, non-whitespace characters

    Args:
        text: Raw reference text (e.g., a job posting)

    Returns:
        Normalized text, ready to split on whitespace

    Example:
        >>> normalize_reference_text("  Senior C++/Rust Engineer (m/f)  ")
        'senior crust engineer mf'
    """
    return strip_non_alphabetic(text.strip().lower())


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
