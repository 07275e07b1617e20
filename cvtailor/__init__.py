"""
CVTAILOR - Curriculum Vitae Tailoring by Term-frequency Relevance

Reorders the content of a generic CV so that it lines up with a target job
description, using a word cloud built from the posting text.

Architecture:
- Intake Context: Reference text (job posting) ingestion
- Targeting Context: Word cloud, phrase scoring and resume assembly
- Templating Context: CV data model, persistence and Markdown output
"""

__version__ = "0.1.0"
