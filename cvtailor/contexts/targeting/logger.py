"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from cvtailor.utils.logger import SessionProvenance
from cvtailor.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, provenance: Optional[SessionProvenance] = None) -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this targeting session
        provenance: CV, job posting and output of the run

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="target", log_dir=log_dir, provenance=provenance)


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_model_built(unique_words: int, total_weight: int) -> None:
    """Log word cloud size after construction."""
    _log_debug(f"Word cloud built: {unique_words} unique words, total weight {total_weight}")


def log_section_ranked(section_name: str, scores: list) -> None:
    """Log the ascending score sequence of one ranked section."""
    _log_debug(f"Ranked {section_name}: {len(scores)} items, scores {scores}")


def log_tailoring_start(cv_path: Path, reference_path: Path, log_file: Path) -> None:
    """Log start of a tailoring session."""
    _log_info(f"Tailoring {cv_path.name} against {reference_path.name}")
    _log_info(f"Log file: {log_file}")


def log_tailoring_result(resume, output_path: Path, elapsed_time: float) -> None:
    """
    Log outcome of a tailoring session.

    Args:
        resume: Assembled Resume
        output_path: Where the rendered document was written
        elapsed_time: Time taken
    """
    skill_count = sum(len(items) for items in resume.skills.values())
    _log_success(
        f"Assembled {skill_count} skills, {len(resume.work_experience)} jobs, "
        f"{len(resume.education)} schools, {len(resume.projects)} projects ({elapsed_time:.2f}s)"
    )
    _log_info(f"  Output: {output_path}")
