"""
Templating Context

Responsibilities:
- Shapes data-layer rows into typed resume records
- Escapes user text and formats dates for LaTeX
- Renders each resume section from its Jinja2 template
- Assembles sections into a complete document behind a static preamble

Owns: Resume record structures, section templates, document assembly
Never: Compiles LaTeX or touches persistence
"""

from resumetex.contexts.templating.assembler import assemble, assemble_resume
from resumetex.contexts.templating.dates import format_date, format_date_range
from resumetex.contexts.templating.escaping import escape_latex, escape_url
from resumetex.contexts.templating.exceptions import PreconditionViolation, TemplateRenderError
from resumetex.contexts.templating.latex_generator import ResumeLaTeXGenerator
from resumetex.contexts.templating.record_normalizer import (
    find_missing_sections,
    load_resume_data,
    load_resume_file,
)
from resumetex.contexts.templating.resume_data_structures import (
    AchievementEntry,
    EducationRecord,
    ExperienceRecord,
    PersonalInfo,
    ProfileLinks,
    ProjectRecord,
    ResumeData,
    SectionSelection,
    SkillCategory,
    SkillCategoryName,
)

__all__ = [
    # Assembly entry points
    "assemble",
    "assemble_resume",
    "ResumeLaTeXGenerator",
    # Leaf helpers
    "escape_latex",
    "escape_url",
    "format_date",
    "format_date_range",
    # Data-layer glue
    "load_resume_data",
    "load_resume_file",
    "find_missing_sections",
    # Errors
    "PreconditionViolation",
    "TemplateRenderError",
    # Data structure classes
    "PersonalInfo",
    "ProfileLinks",
    "EducationRecord",
    "ExperienceRecord",
    "ProjectRecord",
    "SkillCategory",
    "SkillCategoryName",
    "AchievementEntry",
    "SectionSelection",
    "ResumeData",
]
