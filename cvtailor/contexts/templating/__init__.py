"""
Templating Context

Responsibilities:
- Manages the CV data model (skills, work experience, education, projects)
- Saves CVs to and loads CVs from YAML/JSON files
- Formats assembled resumes as markdown

Owns: CV representation, CV persistence, markdown output
Never: Makes content prioritization decisions
"""

from cvtailor.contexts.templating.cv_data_structure import (
    CV,
    Date,
    Education,
    PhoneNumber,
    Project,
    Skills,
    WorkExperience,
)
from cvtailor.contexts.templating.exceptions import InvalidCVStructureError
from cvtailor.contexts.templating.markdown_formatter import (
    format_contact_markdown,
    format_resume_markdown,
    write_resume_markdown,
)

__all__ = [
    # Data structure classes
    "CV",
    "Date",
    "PhoneNumber",
    "Skills",
    "WorkExperience",
    "Education",
    "Project",
    "InvalidCVStructureError",
    # Markdown output
    "format_contact_markdown",
    "format_resume_markdown",
    "write_resume_markdown",
]
