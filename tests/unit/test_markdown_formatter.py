"""Unit tests for markdown output."""

import pytest

from cvtailor.contexts.targeting.assembler import Resume
from cvtailor.contexts.targeting.ranking import RankedItem
from cvtailor.contexts.templating.cv_data_structure import (
    CV,
    Date,
    Education,
    Project,
    WorkExperience,
)
from cvtailor.contexts.templating.markdown_formatter import (
    format_contact_markdown,
    format_education_markdown,
    format_project_markdown,
    format_resume_markdown,
    format_work_experience_markdown,
    write_resume_markdown,
)


@pytest.fixture
def resume():
    return Resume(
        skills={"machine learning": [RankedItem("PyTorch", 0), RankedItem("Python", 2)]},
        work_experience=[
            RankedItem(
                WorkExperience(
                    "Engineer", "Acme", "Remote", ["built things"], Date(2020, 1), Date(2022, 6)
                ),
                1,
            )
        ],
        education=[
            RankedItem(
                Education(
                    "State University",
                    ["Physics", "Math"],
                    "Springfield",
                    [],
                    ["Optics"],
                    3.8,
                    Date(2012),
                    Date(2016),
                ),
                0,
            )
        ],
        projects=[RankedItem(Project("Widget", ["shipped widget"], Date(2021)), 0)],
    )


@pytest.mark.unit
def test_work_experience_markdown():
    experience = WorkExperience("Engineer", "Acme", None, ["a", "b"], Date(2020), None)
    assert format_work_experience_markdown(experience) == "## Engineer 2020\nAcme\n* a\n* b"


@pytest.mark.unit
def test_work_experience_markdown_with_end_and_location():
    experience = WorkExperience("Engineer", "Acme", "Remote", [], Date(2020), Date(2021))
    assert format_work_experience_markdown(experience) == "## Engineer 2020-2021\nAcme Remote"


@pytest.mark.unit
def test_education_markdown():
    education = Education("U", ["Physics", "Math"], "Town", ["Art"], ["Optics", "Lasers"], 3.5, Date(2010))
    assert format_education_markdown(education) == (
        "## U 2010\n"
        "Physics and Math Town\n"
        "Minor in Art\n"
        "* Relevant Coursework: Optics, Lasers\n"
        "* 3.5 GPA"
    )


@pytest.mark.unit
def test_education_markdown_omits_empty_minor_and_coursework():
    education = Education("U", ["Physics"], "Town", [], [], 3.5, Date(2010), Date(2014))
    markdown = format_education_markdown(education)
    assert "Minor in" not in markdown
    assert "Relevant Coursework" not in markdown
    assert markdown.startswith("## U 2010 - 2014")


@pytest.mark.unit
def test_project_markdown():
    project = Project("Widget", ["x"], Date(2021, 3), Date(2021, 9))
    assert format_project_markdown(project) == "## Widget 2021 / 3 - 2021 / 9\n* x"


@pytest.mark.unit
def test_resume_section_order(resume):
    markdown = format_resume_markdown(resume)
    headers = [line for line in markdown.splitlines() if line.startswith("# ")]
    assert headers == ["# Skills", "# Work Experience", "# Education", "# Projects"]


@pytest.mark.unit
def test_resume_skills_capitalized_and_ordered(resume):
    markdown = format_resume_markdown(resume)
    assert "## Machine learning\nPyTorch, Python" in markdown


@pytest.mark.unit
def test_empty_resume():
    assert format_resume_markdown(Resume()) == "# Skills\n# Work Experience\n# Education\n# Projects\n"


@pytest.mark.unit
def test_contact_header():
    cv = CV(name="Leela", phone_number="+1 (555) 123", website="leela.dev")
    assert format_contact_markdown(cv) == "# Leela\n+1 (555) 123 | leela.dev"
    assert format_contact_markdown(CV()) == ""


@pytest.mark.unit
def test_write_resume_markdown(resume, tmp_path):
    path = write_resume_markdown(resume, tmp_path / "out" / "resume.md", cv=CV(name="Leela"))
    content = path.read_text(encoding="utf-8")
    assert content.startswith("# Leela\n\n# Skills")


@pytest.mark.unit
def test_resume_has_no_blank_lines(resume):
    markdown = format_resume_markdown(resume)
    assert "\n\n" not in markdown
    assert markdown.endswith("\n")
