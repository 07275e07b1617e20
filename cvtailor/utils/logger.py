"""
Session logging for tailoring runs.

Each CLI run logs to its own timestamped directory under LOGS_PATH. The log
opens with a provenance header naming the command, the CV, the job posting and
the output file, so a resume can be traced back to what produced it.

Context-specific prefixed wrappers are defined in contexts/{context}/logger.py.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

from cvtailor.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


@dataclass
class SessionProvenance:
    """
    Inputs and output of one tailoring run.

    Attributes:
        cv_path: CV file the resume is assembled from
        reference_path: Job posting the word cloud is built from
        output_path: Where the tailored resume is written
    """

    cv_path: Optional[Path] = None
    reference_path: Optional[Path] = None
    output_path: Optional[Path] = None

    def lines(self) -> List[str]:
        labelled = [
            ("CV", self.cv_path),
            ("Job posting", self.reference_path),
            ("Output", self.output_path),
        ]
        return [f"{label}: {path}" for label, path in labelled if path is not None]


def session_log_dir(command: str, root: Optional[Path] = None) -> Path:
    """
    Directory for one CLI session.

    Args:
        command: CLI command name, used as the directory prefix
        root: Parent directory (default: LOGS_PATH)

    Returns:
        Path like outs/logs/tailor_20251114_123456 (not created)
    """
    return (root or LOGS_PATH) / f"{command}_{now()}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    provenance: Optional[SessionProvenance] = None,
) -> Path:
    """
    Route loguru output to a session log file and the console.

    The file captures DEBUG and above (per-section scores included), the
    console shows INFO and above.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "target")
        log_dir: Directory for this session (created if missing)
        provenance: Files involved in the run, written in the header

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(provenance)

    return log_file


def log_provenance(provenance: Optional[SessionProvenance] = None) -> None:
    """Log the command line, environment and session files as a header block."""
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if provenance is not None:
        for line in provenance.lines():
            logger.info(line)

    logger.info("=" * 80)
