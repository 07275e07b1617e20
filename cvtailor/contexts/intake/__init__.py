"""
Intake Context

Responsibilities:
- Reads the reference text (job posting) that the word cloud is built from

Owns: Reference text ingestion
Never: Scores or reorders resume content
"""

from cvtailor.contexts.intake.reference_text import load_reference_text

__all__ = ["load_reference_text"]
