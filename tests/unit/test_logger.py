"""Unit tests for loguru session setup."""

import sys
from pathlib import Path

import pytest
from loguru import logger

from cvtailor.contexts.targeting.logger import log_model_built, setup_targeting_logger
from cvtailor.utils.logger import SessionProvenance, session_log_dir


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_setup_targeting_logger_writes_provenance(tmp_path, restore_logger):
    provenance = SessionProvenance(
        cv_path=Path("data/cv.yaml"),
        reference_path=Path("jobs/acme.md"),
        output_path=Path("outs/resumes/cv.md"),
    )
    log_file = setup_targeting_logger(tmp_path / "session", provenance)
    log_model_built(unique_words=3, total_weight=7)
    logger.remove()  # closes the file sink

    assert log_file == tmp_path / "session" / "target.log"
    content = log_file.read_text(encoding="utf-8")
    assert f"CV: {Path('data/cv.yaml')}" in content
    assert f"Job posting: {Path('jobs/acme.md')}" in content
    assert f"Output: {Path('outs/resumes/cv.md')}" in content
    assert "[target] Word cloud built: 3 unique words, total weight 7" in content


@pytest.mark.unit
def test_provenance_skips_missing_paths():
    provenance = SessionProvenance(reference_path=Path("jobs/acme.md"))

    assert provenance.lines() == [f"Job posting: {Path('jobs/acme.md')}"]


@pytest.mark.unit
def test_session_log_dir_is_timestamped(tmp_path):
    log_dir = session_log_dir("tailor", root=tmp_path)

    assert log_dir.parent == tmp_path
    assert log_dir.name.startswith("tailor_")
    assert len(log_dir.name) == len("tailor_20251114_123456")
    assert not log_dir.exists()
