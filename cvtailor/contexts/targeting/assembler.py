"""
Resume Assembly

Walks a raw CV, weighs every item against a word cloud, and produces a Resume
whose sections are sorted by weight.

Ordering convention: every section is sorted ASCENDING, lowest weight first.
Ties keep their CV order.

Per-section weights:
- Skills: weight of the skill name. Categories keep their CV order.
- Work experience: sum of description bullet weights + weight of the job title.
  Description bullets are reordered in place first.
- Education: sum of coursework, major and minor weights (school name excluded).
  Coursework is reordered in place first; majors and minors are left alone.
- Projects: sum of description bullet weights (project name excluded).
  Description bullets are reordered in place first.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from cvtailor.contexts.targeting.logger import log_section_ranked
from cvtailor.contexts.targeting.ranking import RankedItem, rank_items, sort_by_weight
from cvtailor.contexts.targeting.term_frequency import PhraseScorer, TermFrequencyModel
from cvtailor.contexts.templating.cv_data_structure import (
    CV,
    Education,
    Project,
    Skills,
    WorkExperience,
)
from cvtailor.utils.report_formatter import Column, TableFormatter
from cvtailor.utils.text_processing import truncate_display


@dataclass
class Resume:
    """
    Ranked view of a CV, ready for rendering.

    Payloads are copies taken after assembly; the Resume holds no reference
    back to the CV it was built from.

    Attributes:
        skills: Category → skills ranked ascending (categories in CV order)
        work_experience: Jobs ranked ascending
        education: Schools ranked ascending
        projects: Projects ranked ascending
    """

    skills: Dict[str, List[RankedItem[str]]] = field(default_factory=dict)
    work_experience: List[RankedItem[WorkExperience]] = field(default_factory=list)
    education: List[RankedItem[Education]] = field(default_factory=list)
    projects: List[RankedItem[Project]] = field(default_factory=list)

    def __str__(self) -> str:
        lines = []
        for category, skills in self.skills.items():
            lines.append(f"Category: {category}")
            lines.append(f"    {', '.join(skill.payload for skill in skills)}")

        lines.append("Work Experience:")
        lines.extend(str(experience.payload) for experience in self.work_experience)
        lines.append("Education:")
        lines.extend(str(education.payload) for education in self.education)
        lines.append("Projects:")
        lines.extend(str(project.payload) for project in self.projects)
        return "\n".join(lines)


class ResumeAssembler:
    """
    Builds Resumes from CVs against one word cloud.

    The word cloud is read-only, so one assembler can serve several threads.
    Each assemble() call takes the CV's lock because it reorders the CV's
    lists in place.
    """

    def __init__(self, model: TermFrequencyModel):
        self.model = model
        self.scorer = PhraseScorer(model)

    def assemble(self, cv: CV) -> Resume:
        """
        Rank every section of a CV.

        Side effect: description bullets (work experience, projects) and
        coursework (education) of the CV's own entries are left sorted
        ascending by weight.

        Args:
            cv: CV to assemble from

        Returns:
            Freshly built Resume
        """
        with cv.lock:
            resume = Resume(
                skills=self.rank_skills(cv.skills),
                work_experience=self._rank_section(
                    "work experience", cv.work_experience, self.weigh_work_experience
                ),
                education=self._rank_section("education", cv.education, self.weigh_education),
                projects=self._rank_section("projects", cv.projects, self.weigh_project),
            )

        return resume

    def _rank_section(self, section_name: str, entries: list, weigh) -> list:
        ranked = rank_items(entries, weigh)
        log_section_ranked(section_name, [item.score for item in ranked])
        return ranked

    # ========================================================================
    # Section strategies
    # ========================================================================

    def rank_skills(self, skills: Skills) -> Dict[str, List[RankedItem[str]]]:
        """Rank skills within each category. Category order is preserved."""
        return {
            category: self._rank_section(f"skills/{category}", names, self.scorer.weight)
            for category, names in skills.skill_tree.items()
        }

    def weigh_work_experience(self, experience: WorkExperience) -> int:
        sort_by_weight(experience.job_description, self.scorer.weight)
        return self.scorer.sum_weights(experience.job_description) + self.scorer.weight(
            experience.job_title
        )

    def weigh_education(self, education: Education) -> int:
        # School name intentionally not scored
        sort_by_weight(education.coursework, self.scorer.weight)
        return (
            self.scorer.sum_weights(education.coursework)
            + self.scorer.sum_weights(education.major)
            + self.scorer.sum_weights(education.minor)
        )

    def weigh_project(self, project: Project) -> int:
        sort_by_weight(project.project_description, self.scorer.weight)
        return self.scorer.sum_weights(project.project_description)


def assemble_resume(cv: CV, model: TermFrequencyModel) -> Resume:
    """
    Assemble a Resume from a CV against a word cloud.

    Functional shorthand for ResumeAssembler(model).assemble(cv).
    """
    return ResumeAssembler(model).assemble(cv)


def format_ranking_report(resume: Resume) -> str:
    """
    Render every ranked item with its score, section by section.

    Args:
        resume: Assembled Resume

    Returns:
        Text report
    """
    table = TableFormatter([Column("Score", 7, ">"), Column("Item", 60)], total_width=68)

    table.add_section_header("Skills")
    table.add_table_header()
    for category, skills in resume.skills.items():
        table.add_text(f"[{category}]")
        for skill in skills:
            table.add_row([skill.score, truncate_display(skill.payload, 60)])

    sections = [
        ("Work Experience", resume.work_experience, lambda e: f"{e.job_title} @ {e.company_name}"),
        ("Education", resume.education, lambda e: e.school_name),
        ("Projects", resume.projects, lambda e: e.project_name),
    ]
    for title, items, label in sections:
        table.add_text("")
        table.add_section_header(title)
        table.add_table_header()
        for item in items:
            table.add_row([item.score, truncate_display(label(item.payload), 60)])

    return table.render()
