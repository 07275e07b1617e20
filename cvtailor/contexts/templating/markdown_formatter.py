"""
Markdown Formatting

Renders an assembled Resume as markdown. Sections appear in fixed order
(Skills, Work Experience, Education, Projects) and items appear in the order
the Targeting context ranked them. Scores are not rendered.
"""

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from cvtailor.contexts.templating.cv_data_structure import (
    CV,
    Date,
    Education,
    Project,
    WorkExperience,
)

if TYPE_CHECKING:
    from cvtailor.contexts.targeting.assembler import Resume


def _capitalize(text: str) -> str:
    """Uppercase the first character only ("machine learning" -> "Machine learning")."""
    return text[:1].upper() + text[1:]


def _format_date_range(start: Date, end: Optional[Date] = None, separator: str = " - ") -> str:
    if end is None:
        return str(start)
    return f"{start}{separator}{end}"


def format_contact_markdown(cv: CV) -> str:
    """
    Format the CV owner's name and contact details as a markdown header.

    Args:
        cv: CV holding name, phone, LinkedIn and website

    Returns:
        Markdown header block (empty string if the CV has no name or contacts)
    """
    parts = []

    if cv.name:
        parts.append(f"# {cv.name}")

    contacts = [str(cv.phone) if cv.phone else None, cv.linked_in, cv.website]
    contacts = [contact for contact in contacts if contact]
    if contacts:
        parts.append(" | ".join(contacts))

    return "\n".join(parts)


def format_work_experience_markdown(experience: WorkExperience) -> str:
    """
    Format single work experience entry as markdown.

    Title and dates form the ## header, company and location follow on one
    line, then the description bullets.
    """
    parts = [f"## {experience.job_title} {_format_date_range(experience.job_start, experience.job_end, '-')}"]
    parts.append(f"{experience.company_name} {experience.job_location or ''}".rstrip())

    for item in experience.job_description:
        parts.append(f"* {item}")

    return "\n".join(parts)


def format_education_markdown(education: Education) -> str:
    """
    Format single education entry as markdown.

    Majors are joined with "and", minors get their own line only when present.
    """
    parts = [f"## {education.school_name} {_format_date_range(education.education_start, education.education_end)}"]
    parts.append(f"{' and '.join(education.major)} {education.location}".strip())

    if education.minor:
        parts.append(f"Minor in {' and '.join(education.minor)}")

    if education.coursework:
        parts.append(f"* Relevant Coursework: {', '.join(education.coursework)}")

    parts.append(f"* {education.gpa} GPA")

    return "\n".join(parts)


def format_project_markdown(project: Project) -> str:
    """Format single project entry as markdown."""
    parts = [f"## {project.project_name} {_format_date_range(project.project_start, project.project_end)}"]

    for item in project.project_description:
        parts.append(f"* {item}")

    return "\n".join(parts)


def format_resume_markdown(resume: "Resume") -> str:
    """
    Format an assembled Resume as markdown.

    Blocks are joined with single newlines, with no blank line between
    sections or entries; the headers alone delimit them.

    Args:
        resume: Resume from the Targeting context

    Returns:
        Markdown document
    """
    parts: List[str] = ["# Skills"]
    for category, skills in resume.skills.items():
        parts.append(f"## {_capitalize(category)}")
        parts.append(", ".join(skill.payload for skill in skills))

    parts.append("# Work Experience")
    parts.extend(format_work_experience_markdown(item.payload) for item in resume.work_experience)

    parts.append("# Education")
    parts.extend(format_education_markdown(item.payload) for item in resume.education)

    parts.append("# Projects")
    parts.extend(format_project_markdown(item.payload) for item in resume.projects)

    return "\n".join(parts) + "\n"


def write_resume_markdown(resume: "Resume", path: Union[str, Path], cv: Optional[CV] = None) -> Path:
    """
    Write an assembled Resume to a markdown file.

    Args:
        resume: Resume from the Targeting context
        path: Destination file (parent directories are created)
        cv: Optional CV whose name and contacts are written as a header

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    content = format_resume_markdown(resume)
    if cv is not None:
        header = format_contact_markdown(cv)
        if header:
            content = f"{header}\n\n{content}"

    path.write_text(content, encoding="utf-8")
    return path
