"""
CV Data Structure

Defines the raw, unordered curriculum vitae that resumes are assembled from.
This structure serves as the interface between Templating and Targeting contexts.

Templating owns:
- Authoring CVs (add_skill, add_work_experience, ...)
- Saving CVs to and loading CVs from YAML/JSON files

Targeting reads CV instances and reorders description/coursework lists in place
while assembling a Resume.
"""

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from omegaconf import OmegaConf

from cvtailor.contexts.templating.exceptions import InvalidCVStructureError

DEFAULT_SKILL_CATEGORY = "default"


# ============================================================================
# Validation helpers
# ============================================================================


def _require(data: Any, key: str, context: str) -> Any:
    """Fetch a required key, raising InvalidCVStructureError if absent."""
    if not isinstance(data, dict):
        raise InvalidCVStructureError(f"Expected a mapping, got {type(data).__name__}", context)
    if key not in data:
        raise InvalidCVStructureError(f"Missing required field '{key}'", f"{context}.{key}")
    return data[key]


def _require_list(data: Any, key: str, context: str) -> List[Any]:
    """Fetch a required list, raising InvalidCVStructureError if absent or not a list."""
    value = _require(data, key, context)
    if not isinstance(value, list):
        raise InvalidCVStructureError(
            f"Expected a list for '{key}', got {type(value).__name__}", f"{context}.{key}"
        )
    return value


def _optional_list(data: Dict[str, Any], key: str, context: str) -> List[Any]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise InvalidCVStructureError(
            f"Expected a list for '{key}', got {type(value).__name__}", f"{context}.{key}"
        )
    return value


def _require_text(data: Any, key: str, context: str) -> str:
    value = _require(data, key, context)
    if not isinstance(value, str):
        raise InvalidCVStructureError(
            f"Expected text for '{key}', got {type(value).__name__}", f"{context}.{key}"
        )
    return value


def _check_text_items(values: List[Any], path: str) -> List[str]:
    """Ensure every list item is a string (unquoted YAML like `- 101` loads as int)."""
    for i, value in enumerate(values):
        if not isinstance(value, str):
            raise InvalidCVStructureError(f"Expected text, got {type(value).__name__}", f"{path}[{i}]")
    return values


def _require_text_list(data: Any, key: str, context: str) -> List[str]:
    return _check_text_items(_require_list(data, key, context), f"{context}.{key}")


def _optional_text_list(data: Dict[str, Any], key: str, context: str) -> List[str]:
    return _check_text_items(_optional_list(data, key, context), f"{context}.{key}")


# ============================================================================
# Value types
# ============================================================================


@dataclass
class Date:
    """
    Partial calendar date. Month and day are optional.

    Attributes:
        year: Four-digit year
        month: Month number (1-12)
        day: Day of month
    """

    year: int
    month: Optional[int] = None
    day: Optional[int] = None

    def __str__(self) -> str:
        parts = [str(self.year)]
        if self.month is not None:
            parts.append(str(self.month))
            if self.day is not None:
                parts.append(str(self.day))
        return " / ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {"year": self.year, "month": self.month, "day": self.day}

    @classmethod
    def from_dict(cls, data: Any, context: str = "date") -> "Date":
        return cls(
            year=_require(data, "year", context),
            month=data.get("month"),
            day=data.get("day"),
        )


def _optional_date(data: Dict[str, Any], key: str, context: str) -> Optional[Date]:
    value = data.get(key)
    return Date.from_dict(value, f"{context}.{key}") if value is not None else None


@dataclass
class PhoneNumber:
    """
    Phone number split into country code, optional area code and local number.

    Attributes:
        country_code: Token carrying the '+' prefix (e.g., "+1")
        area_code: Token wrapped in parentheses (e.g., "(555)"), if any
        phone_number: Remaining digits, concatenated
    """

    country_code: str
    area_code: Optional[str]
    phone_number: str

    @classmethod
    def parse(cls, text: str) -> "PhoneNumber":
        """
        Parse a space-separated phone number like "+1 (555) 2321 123 123".

        The token containing '+' is the country code, the token containing both
        '(' and ')' is the area code, every other token is appended to the number.

        Example:
            >>> PhoneNumber.parse("+1 (555) 2321 123")
            PhoneNumber(country_code='+1', area_code='(555)', phone_number='2321123')
        """
        country_code = ""
        area_code = None
        number = ""

        for token in text.split(" "):
            if "+" in token:
                country_code = token
            elif "(" in token and ")" in token:
                area_code = token
            else:
                number += token

        return cls(country_code=country_code, area_code=area_code, phone_number=number)

    def __str__(self) -> str:
        parts = [self.country_code]
        if self.area_code:
            parts.append(self.area_code)
        parts.append(self.phone_number)
        return " ".join(part for part in parts if part)


# ============================================================================
# CV sections
# ============================================================================


@dataclass
class Skills:
    """
    Skill names grouped by category.

    Categories are case-folded and kept in insertion order, so the order in
    which categories were first added is the order they are assembled and
    rendered in.

    Attributes:
        skill_tree: Category → list of skill names
    """

    skill_tree: Dict[str, List[str]] = field(default_factory=dict)

    def add_skill(self, skill_name: str, category: Optional[str] = None) -> None:
        """
        Append a skill to a category, creating the category if needed.

        Args:
            skill_name: Skill as it should appear on the resume
            category: Category name (lowercased). Defaults to "default".
        """
        category_name = category.lower() if category is not None else DEFAULT_SKILL_CATEGORY
        self.skill_tree.setdefault(category_name, []).append(skill_name)

    def __str__(self) -> str:
        lines = ["Skills:"]
        for category, skills in self.skill_tree.items():
            lines.append(f"    Category: {category}")
            lines.append(f"        {', '.join(skills)}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {"skill_tree": {category: list(skills) for category, skills in self.skill_tree.items()}}

    @classmethod
    def from_dict(cls, data: Any, context: str = "skills") -> "Skills":
        tree = _require(data, "skill_tree", context) or {}
        if not isinstance(tree, dict):
            raise InvalidCVStructureError("Expected a mapping of category to skills", f"{context}.skill_tree")

        skills = cls()
        for category, names in tree.items():
            path = f"{context}.skill_tree.{category}"
            if not isinstance(names, list):
                raise InvalidCVStructureError(
                    f"Expected a list of skills, got {type(names).__name__}", path
                )
            # Keys differing only in case merge into one category
            skills.skill_tree.setdefault(str(category).lower(), []).extend(
                _check_text_items(names, path)
            )
        return skills


@dataclass
class WorkExperience:
    """
    One job held by the candidate.

    Attributes:
        job_title: Position title (scored)
        company_name: Employer
        job_location: Where the job was based
        job_description: Description bullets (scored, reordered during assembly)
        job_start: Start date
        job_end: End date, None if current
    """

    job_title: str
    company_name: str
    job_location: Optional[str] = None
    job_description: List[str] = field(default_factory=list)
    job_start: Date = field(default_factory=lambda: Date(year=0))
    job_end: Optional[Date] = None

    def __str__(self) -> str:
        lines = [
            f"    Job Title: {self.job_title}",
            f"        Company Name: {self.company_name}",
            f"        Location: {self.job_location or 'N/A'}",
            f"        Job Start: {self.job_start}",
            f"        Job End: {self.job_end or 'N/A'}",
            "        Job Description:",
        ]
        lines.extend(f"            * {item}" for item in self.job_description)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "job_title": self.job_title,
            "company_name": self.company_name,
            "job_location": self.job_location,
            "job_description": list(self.job_description),
            "job_start": self.job_start.to_dict(),
            "job_end": self.job_end.to_dict() if self.job_end else None,
        }

    @classmethod
    def from_dict(cls, data: Any, context: str = "work_experience") -> "WorkExperience":
        return cls(
            job_title=_require_text(data, "job_title", context),
            company_name=_require_text(data, "company_name", context),
            job_location=data.get("job_location"),
            job_description=_require_text_list(data, "job_description", context),
            job_start=Date.from_dict(_require(data, "job_start", context), f"{context}.job_start"),
            job_end=_optional_date(data, "job_end", context),
        )


@dataclass
class Education:
    """
    One school attended by the candidate.

    Majors, minors and coursework are scored. The school name is not.

    Attributes:
        school_name: Institution
        major: Major(s)
        location: Where the school is
        minor: Minor(s)
        coursework: Relevant courses (reordered during assembly)
        gpa: Grade point average
        education_start: Start date
        education_end: End date, None if ongoing
    """

    school_name: str
    major: List[str] = field(default_factory=list)
    location: str = ""
    minor: List[str] = field(default_factory=list)
    coursework: List[str] = field(default_factory=list)
    gpa: float = 0.0
    education_start: Date = field(default_factory=lambda: Date(year=0))
    education_end: Optional[Date] = None

    def __str__(self) -> str:
        return "\n".join(
            [
                f"    School Name: {self.school_name}",
                f"    Major(s): {', '.join(self.major)}",
                f"    Minor(s): {', '.join(self.minor)}",
                f"    Location: {self.location}",
                f"    Courses: {', '.join(self.coursework)}",
                f"    GPA: {self.gpa}",
                f"    Start Date: {self.education_start}",
                f"    End Date: {self.education_end or 'N/A'}",
            ]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "school_name": self.school_name,
            "major": list(self.major),
            "location": self.location,
            "minor": list(self.minor),
            "coursework": list(self.coursework),
            "gpa": self.gpa,
            "education_start": self.education_start.to_dict(),
            "education_end": self.education_end.to_dict() if self.education_end else None,
        }

    @classmethod
    def from_dict(cls, data: Any, context: str = "education") -> "Education":
        return cls(
            school_name=_require_text(data, "school_name", context),
            major=_optional_text_list(data, "major", context),
            location=data.get("location") or "",
            minor=_optional_text_list(data, "minor", context),
            coursework=_optional_text_list(data, "coursework", context),
            gpa=float(data.get("gpa") or 0.0),
            education_start=Date.from_dict(
                _require(data, "education_start", context), f"{context}.education_start"
            ),
            education_end=_optional_date(data, "education_end", context),
        )


@dataclass
class Project:
    """
    A personal or professional project.

    Attributes:
        project_name: Project title (not scored)
        project_description: Description bullets (scored, reordered during assembly)
        project_start: Start date
        project_end: End date, None if ongoing
    """

    project_name: str
    project_description: List[str] = field(default_factory=list)
    project_start: Date = field(default_factory=lambda: Date(year=0))
    project_end: Optional[Date] = None

    def __str__(self) -> str:
        lines = [f"    {self.project_name}"]
        lines.extend(f"        * {item}" for item in self.project_description)
        lines.append(f"    Start Date: {self.project_start}")
        lines.append(f"    End Date: {self.project_end or 'N/A'}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project_name": self.project_name,
            "project_description": list(self.project_description),
            "project_start": self.project_start.to_dict(),
            "project_end": self.project_end.to_dict() if self.project_end else None,
        }

    @classmethod
    def from_dict(cls, data: Any, context: str = "projects") -> "Project":
        return cls(
            project_name=_require_text(data, "project_name", context),
            project_description=_require_text_list(data, "project_description", context),
            project_start=Date.from_dict(
                _require(data, "project_start", context), f"{context}.project_start"
            ),
            project_end=_optional_date(data, "project_end", context),
        )


# ============================================================================
# CV
# ============================================================================


@dataclass
class CV:
    """
    Complete, unordered curriculum vitae.

    The CV is the mutable source of truth. Assembling a resume reorders the
    description and coursework lists of its entries in place; nothing else is
    modified. Assembly holds `lock` for its whole duration, so concurrent
    assemblies over the same CV run one after another.
    """

    name: str = ""
    linked_in: Optional[str] = None
    website: Optional[str] = None
    phone_number: Optional[str] = None
    skills: Skills = field(default_factory=Skills)
    work_experience: List[WorkExperience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)

    def __post_init__(self):
        # Not a dataclass field: asdict, eq and repr ignore it
        self._lock = threading.Lock()

    def __getstate__(self) -> Dict[str, Any]:
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        # Copies and unpickled CVs get their own lock
        self.__dict__.update(state)
        self._lock = threading.Lock()

    @property
    def lock(self) -> threading.Lock:
        """Exclusive lock held while a resume is assembled from this CV."""
        return self._lock

    @property
    def phone(self) -> Optional[PhoneNumber]:
        return PhoneNumber.parse(self.phone_number) if self.phone_number else None

    # =========================================================================
    # AUTHORING
    # =========================================================================

    def add_skill(self, skill_name: str, category: Optional[str] = None) -> None:
        self.skills.add_skill(skill_name, category)

    def add_work_experience(
        self,
        job_title: str,
        company_name: str,
        job_location: Optional[str],
        job_description: List[str],
        job_start: Date,
        job_end: Optional[Date] = None,
    ) -> None:
        self.work_experience.append(
            WorkExperience(
                job_title=job_title,
                company_name=company_name,
                job_location=job_location,
                job_description=job_description,
                job_start=job_start,
                job_end=job_end,
            )
        )

    def add_education(
        self,
        school_name: str,
        major: List[str],
        location: str,
        minor: List[str],
        coursework: List[str],
        gpa: float,
        education_start: Date,
        education_end: Optional[Date] = None,
    ) -> None:
        self.education.append(
            Education(
                school_name=school_name,
                major=major,
                location=location,
                minor=minor,
                coursework=coursework,
                gpa=gpa,
                education_start=education_start,
                education_end=education_end,
            )
        )

    def add_project(
        self,
        project_name: str,
        project_description: List[str],
        project_start: Date,
        project_end: Optional[Date] = None,
    ) -> None:
        self.projects.append(
            Project(
                project_name=project_name,
                project_description=project_description,
                project_start=project_start,
                project_end=project_end,
            )
        )

    # =========================================================================
    # ASSEMBLY
    # =========================================================================

    def generate_resume(self, model):
        """
        Assemble a Resume ranked against a word cloud.

        Reorders this CV's description and coursework lists in place.

        Args:
            model: TermFrequencyModel built from the target job posting

        Returns:
            Resume
        """
        # Import here to avoid circular dependency
        from cvtailor.contexts.targeting.assembler import ResumeAssembler

        return ResumeAssembler(model).assemble(self)

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "linked_in": self.linked_in,
            "website": self.website,
            "phone_number": self.phone_number,
            "skills": self.skills.to_dict(),
            "work_experience": [experience.to_dict() for experience in self.work_experience],
            "education": [education.to_dict() for education in self.education],
            "projects": [project.to_dict() for project in self.projects],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "CV":
        """
        Build a CV from its serialized dict form.

        Raises:
            InvalidCVStructureError: If a required field is missing or mistyped
        """
        if not isinstance(data, dict):
            raise InvalidCVStructureError(f"Expected a mapping at top level, got {type(data).__name__}")

        return cls(
            name=data.get("name") or "",
            linked_in=data.get("linked_in"),
            website=data.get("website"),
            phone_number=data.get("phone_number"),
            skills=Skills.from_dict(data["skills"]) if data.get("skills") else Skills(),
            work_experience=[
                WorkExperience.from_dict(entry, f"work_experience[{i}]")
                for i, entry in enumerate(_optional_list(data, "work_experience", "cv"))
            ],
            education=[
                Education.from_dict(entry, f"education[{i}]")
                for i, entry in enumerate(_optional_list(data, "education", "cv"))
            ],
            projects=[
                Project.from_dict(entry, f"projects[{i}]")
                for i, entry in enumerate(_optional_list(data, "projects", "cv"))
            ],
        )

    def save_to_file(self, path: Union[str, Path]) -> Path:
        """
        Write the CV to a YAML file.

        Args:
            path: Destination file (parent directories are created)

        Returns:
            Path written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        OmegaConf.save(OmegaConf.create(self.to_dict()), path)
        return path

    @classmethod
    def load_from_file(cls, path: Union[str, Path]) -> "CV":
        """
        Load a CV from a YAML or JSON file.

        Raises:
            FileNotFoundError: If path does not exist
            InvalidCVStructureError: If the file does not describe a valid CV
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"CV file not found: {path}")

        data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)

        try:
            return cls.from_dict(data)
        except InvalidCVStructureError as e:
            raise InvalidCVStructureError(e.message, e.field_path, source_path=path) from e

    def __str__(self) -> str:
        parts = [str(self.skills), "Work Experience:"]
        parts.extend(str(experience) for experience in self.work_experience)
        parts.append("Education:")
        parts.extend(str(education) for education in self.education)
        parts.append("Projects:")
        parts.extend(str(project) for project in self.projects)
        return "\n".join(parts)
