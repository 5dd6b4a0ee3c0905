"""
LaTeX Generator

Renders resume records into LaTeX section fragments and whole documents.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from jinja2 import Template, TemplateError

from resumetex.contexts.templating.dates import format_date, format_date_range
from resumetex.contexts.templating.escaping import escape_latex, escape_url
from resumetex.contexts.templating.exceptions import TemplateRenderError
from resumetex.contexts.templating.logger import _log_debug
from resumetex.contexts.templating.registries import TemplateRegistry
from resumetex.contexts.templating.resume_data_structures import (
    AchievementEntry,
    EducationRecord,
    ExperienceRecord,
    PersonalInfo,
    ProjectRecord,
    SkillCategory,
    SkillCategoryName,
)
from resumetex.utils.text_processing import is_blank, non_blank, set_max_consecutive_blank_lines

# Heading link order and labels
PROFILE_LINK_LABELS = (
    ("portfolio", "Portfolio"),
    ("linkedin", "LinkedIn"),
    ("github", "GitHub"),
    ("leetcode", "LeetCode"),
)


class ResumeLaTeXGenerator:
    """
    Converts resume records to LaTeX.

    Each render_* method is a pure function of its records (plus the injected
    escaper and date formatter) and returns "" when the section has nothing
    to show.
    """

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        escape: Callable[[object], str] = escape_latex,
        date_formatter: Callable[[object], str] = format_date,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        self.escape = escape
        self.date_formatter = date_formatter

        self.template_registry.env.filters.update(
            {
                "latex": self.escape,
                "url": escape_url,
                "date_range": self._date_range,
                "nonblank": non_blank,
                "project_bullets": self._project_bullets,
            }
        )

    def _date_range(self, record) -> str:
        return format_date_range(
            record.start_date,
            record.end_date,
            is_current=record.is_current,
            formatter=self.date_formatter,
        )

    @staticmethod
    def _project_bullets(project: ProjectRecord) -> List[str]:
        """Structured bullets win; the flat summary is only a fallback."""
        bullets = non_blank(project.description)
        if bullets:
            return bullets
        if not is_blank(project.summary):
            return [project.summary]
        return []

    def _render(self, type_name: str, template: Template, **context) -> str:
        try:
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render '{type_name}'",
                type_name=type_name,
                template_path=template.filename,
                original_error=e,
            ) from e

    def _render_type(self, type_name: str, **context) -> str:
        try:
            template = self.template_registry.get_template(type_name)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to load template for '{type_name}'",
                type_name=type_name,
                template_path=self.template_registry.get_template_path(type_name),
                original_error=e,
            ) from e
        return self._render(type_name, template, **context)

    def render_heading(self, personal_info: PersonalInfo) -> str:
        """
        Render the centered name and contact line.

        Assumes personal_info.name has already been checked by the caller.
        Profile links follow phone and email in a fixed order, each omitted
        when empty.
        """
        links = []
        for attribute, label in PROFILE_LINK_LABELS:
            url = getattr(personal_info.links, attribute, None)
            if url:
                links.append({"label": label, "url": url})

        return self._render_type(
            "heading",
            name=personal_info.name,
            phone=personal_info.phone,
            email=personal_info.email,
            links=links,
        )

    def render_education(self, records: Sequence[EducationRecord]) -> str:
        """Render education entries in input order."""
        if not records:
            return ""
        return self._render_type("education", records=list(records))

    def render_experience(self, records: Sequence[ExperienceRecord]) -> str:
        """
        Render experience entries.

        Expects an already selection-filtered list; omitted when empty.
        """
        if not records:
            return ""
        return self._render_type("experience", records=list(records))

    def render_projects(self, records: Sequence[ProjectRecord]) -> str:
        """
        Render project entries.

        Expects an already selection-filtered list; omitted when empty.
        """
        if not records:
            return ""
        return self._render_type("projects", records=list(records))

    def render_skills(self, categories: Iterable[SkillCategory]) -> str:
        """
        Render skill categories in enumeration order.

        Categories with no non-blank skills are skipped; several entries for
        the same category are merged in input order.
        """
        merged: Dict[SkillCategoryName, List[str]] = {}
        for category in categories or []:
            name = SkillCategoryName(category.name)
            merged.setdefault(name, []).extend(non_blank(category.skills))

        rows = [
            {"label": name.label, "skills": merged[name]}
            for name in SkillCategoryName
            if merged.get(name)
        ]
        if not rows:
            return ""
        return self._render_type("skills", categories=rows)

    def render_achievements(self, entries: Iterable[AchievementEntry]) -> str:
        """Render one bullet per achievement; blank entries are skipped."""
        records = [
            entry
            for entry in entries or []
            if not (is_blank(entry.title) and is_blank(entry.description))
        ]
        if not records:
            return ""
        return self._render_type("achievements", records=records)

    def generate_preamble(self) -> str:
        """Static preamble: packages, page setup and the custom resume macros."""
        template = self.template_registry.get_structure_template("preamble")
        return self._render("preamble", template)

    def generate_document(self, sections: List[str], preamble: Optional[str] = None) -> str:
        """
        Wrap rendered section fragments in the preamble and document markers.

        Args:
            sections: Rendered fragments in emission order; empty ones are dropped
            preamble: Preamble override (defaults to the static preamble)

        Returns:
            Complete LaTeX document string
        """
        if preamble is None:
            preamble = self.generate_preamble()

        fragments = [section.strip("\n") for section in sections if section and section.strip()]
        _log_debug(f"Wrapping {len(fragments)} fragments in document template")

        template = self.template_registry.get_structure_template("document")
        generated_latex = self._render("document", template, preamble=preamble, sections=fragments)

        return set_max_consecutive_blank_lines(generated_latex, max_consecutive=1)
