"""
Reference text ingestion.

The Targeting context never touches the filesystem; callers hand it the text
returned from here.
"""

from pathlib import Path
from typing import Union


def load_reference_text(path: Union[str, Path]) -> str:
    """
    Read a job posting (or any reference text) from disk.

    The text is returned verbatim. Normalization happens when the word cloud
    is built.

    Args:
        path: Path to a UTF-8 text or markdown file

    Returns:
        File contents

    Raises:
        FileNotFoundError: If path does not exist
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Reference text not found: {path}")

    return path.read_text(encoding="utf-8")
