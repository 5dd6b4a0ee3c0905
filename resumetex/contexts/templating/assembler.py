"""
Document Assembler

Entry point for turning one user's resume records into a complete LaTeX document.

Sections are emitted in a fixed order: heading, education, experience,
projects, achievements, skills. Only the heading is mandatory; every other
section disappears silently when it has nothing to show.
"""

from functools import lru_cache
from typing import Mapping, Optional, Sequence, Union

from resumetex.contexts.templating.exceptions import PreconditionViolation
from resumetex.contexts.templating.latex_generator import ResumeLaTeXGenerator
from resumetex.contexts.templating.logger import log_assembly_result, log_assembly_start
from resumetex.contexts.templating.record_normalizer import normalize_personal_info
from resumetex.contexts.templating.resume_data_structures import (
    AchievementEntry,
    EducationRecord,
    ExperienceRecord,
    PersonalInfo,
    ProjectRecord,
    ResumeData,
    SectionSelection,
    SkillCategory,
)
from resumetex.utils.text_processing import is_blank

SelectionLike = Union[SectionSelection, Mapping, None]


@lru_cache(maxsize=1)
def _default_generator() -> ResumeLaTeXGenerator:
    return ResumeLaTeXGenerator()


def _coerce_personal_info(personal_info) -> PersonalInfo:
    if isinstance(personal_info, Mapping):
        personal_info = normalize_personal_info(personal_info, personal_info.get("links"))

    if personal_info is None or is_blank(getattr(personal_info, "name", None)):
        raise PreconditionViolation(
            "Personal information is required to generate a resume",
            field_name="personal_info.name",
        )
    return personal_info


def _coerce_selection(selection: SelectionLike) -> SectionSelection:
    if isinstance(selection, SectionSelection):
        return selection
    return SectionSelection.from_dict(selection)


def assemble(
    personal_info: Union[PersonalInfo, Mapping, None],
    education: Sequence[EducationRecord] = (),
    experience: Sequence[ExperienceRecord] = (),
    projects: Sequence[ProjectRecord] = (),
    skills: Sequence[SkillCategory] = (),
    achievements: Sequence[AchievementEntry] = (),
    selection: SelectionLike = None,
    generator: Optional[ResumeLaTeXGenerator] = None,
) -> str:
    """
    Assemble a complete LaTeX resume.

    Args:
        personal_info: Heading data; its name must be non-empty
        education: Education records in submission order
        experience: Experience records; filtered by selection
        projects: Project records; filtered by selection
        skills: Skill categories
        achievements: Achievement entries
        selection: SectionSelection, {"experiences": {...}, "projects": {...}}, or a
                   flat {index: flag} map (default: everything included)
        generator: Generator to render with (default: shared bundled-template generator)

    Returns:
        Complete document text, newline-delimited

    Raises:
        PreconditionViolation: If personal info or its name is missing

    Example:
        >>> latex = assemble(PersonalInfo(name="Jane Doe"))
        >>> latex.rstrip().endswith("\\\\end{document}")
        True
    """
    personal_info = _coerce_personal_info(personal_info)
    selection = _coerce_selection(selection)
    generator = generator or _default_generator()

    log_assembly_start(
        personal_info.name,
        {
            "education": len(education or ()),
            "experience": len(experience or ()),
            "projects": len(projects or ()),
            "skills": len(skills or ()),
            "achievements": len(achievements or ()),
        },
    )

    selected_experience = [
        record
        for index, record in enumerate(experience or ())
        if selection.includes_experience(index)
    ]
    selected_projects = [
        record
        for index, record in enumerate(projects or ())
        if selection.includes_project(index)
    ]

    named_sections = [
        ("education", generator.render_education(education or ())),
        ("experience", generator.render_experience(selected_experience)),
        ("projects", generator.render_projects(selected_projects)),
        ("achievements", generator.render_achievements(achievements or ())),
        ("skills", generator.render_skills(skills or ())),
    ]

    sections = [generator.render_heading(personal_info)]
    sections.extend(fragment for _, fragment in named_sections if fragment)

    document = generator.generate_document(sections)

    log_assembly_result([name for name, fragment in named_sections if fragment], len(document))
    return document


def assemble_resume(
    data: ResumeData,
    selection: SelectionLike = None,
    generator: Optional[ResumeLaTeXGenerator] = None,
) -> str:
    """
    Assemble a complete LaTeX resume from aggregated ResumeData.

    Raises:
        PreconditionViolation: If data has no personal info or an empty name
    """
    return assemble(
        data.personal_info,
        data.education,
        data.experience,
        data.projects,
        data.skills,
        data.achievements,
        selection=selection,
        generator=generator,
    )
