"""Unit tests for reference text ingestion."""

import pytest

from cvtailor.contexts.intake import load_reference_text


@pytest.mark.unit
def test_load_reference_text_verbatim(tmp_path):
    path = tmp_path / "posting.md"
    path.write_text("# Role\n- Python, 5+ years\n", encoding="utf-8")

    assert load_reference_text(path) == "# Role\n- Python, 5+ years\n"
    assert load_reference_text(str(path)) == "# Role\n- Python, 5+ years\n"


@pytest.mark.unit
def test_load_reference_text_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_reference_text(tmp_path / "nope.md")
