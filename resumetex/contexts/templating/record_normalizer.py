"""
Record Normalizer

Shapes the rows returned by the resume data layer into the typed records the
generator consumes.

The data layer stores one row per entry with camelCase columns, keeps skills as
one row with a JSON list per category column, keeps achievements as one row
with a JSON "text" list, and keeps profile links in their own row. Older rows
also drift between string and list shapes for bullet and technology fields.
All of that is resolved here, so the generator only ever sees the list shapes.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from omegaconf import OmegaConf

from resumetex.contexts.templating.exceptions import PreconditionViolation
from resumetex.contexts.templating.logger import _log_debug, _log_warning
from resumetex.contexts.templating.resume_data_structures import (
    AchievementEntry,
    EducationRecord,
    ExperienceRecord,
    PersonalInfo,
    ProfileLinks,
    ProjectRecord,
    ResumeData,
    SkillCategory,
    SkillCategoryName,
)
from resumetex.utils.text_processing import is_blank, non_blank

Row = Mapping[str, Any]


def _pick(row: Row, *keys: str, default: Any = None) -> Any:
    """Return the first present, non-None value among alternative column names."""
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return default


def _text(row: Row, *keys: str) -> str:
    value = _pick(row, *keys, default="")
    return str(value).strip()


def _optional_text(row: Row, *keys: str) -> Optional[str]:
    value = _pick(row, *keys)
    if is_blank(value):
        return None
    return str(value).strip()


def _as_list(value: Any, split_commas: bool = False) -> List[str]:
    """
    Coerce a legacy string-or-list field to a list of strings.

    Example:
        >>> _as_list("Python, FastAPI", split_commas=True)
        ['Python', 'FastAPI']
        >>> _as_list("Single bullet")
        ['Single bullet']
    """
    if value is None:
        return []
    if isinstance(value, str):
        if split_commas:
            return non_blank(part.strip() for part in value.split(","))
        return [value] if value.strip() else []
    if isinstance(value, Iterable):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _first_row(rows: Any) -> Optional[Row]:
    """Single-row tables (links, skills, achievements) come back as one-element lists."""
    if rows is None:
        return None
    if isinstance(rows, Mapping):
        return rows
    rows = list(rows)
    if not rows:
        return None
    if len(rows) > 1:
        _log_warning(f"Expected a single row, got {len(rows)}; using the first")
    return _require_mapping(rows[0], "row")


def _require_mapping(row: Any, field_name: str) -> Row:
    if not isinstance(row, Mapping):
        raise PreconditionViolation(
            f"Expected a mapping, got {type(row).__name__}", field_name=field_name
        )
    return row


def _rows(rows: Any, field_name: str) -> List[Row]:
    if rows is None:
        return []
    if isinstance(rows, Mapping) or isinstance(rows, str):
        raise PreconditionViolation("Expected a list of rows", field_name=field_name)
    return [_require_mapping(row, field_name) for row in rows]


def normalize_personal_info(user: Optional[Row], links: Any = None) -> Optional[PersonalInfo]:
    """
    Build PersonalInfo from the user row and the optional links row.

    Returns None when there is no user row at all; a blank name is kept as-is
    so the assembler can reject it.
    """
    if user is None:
        return None
    user = _require_mapping(user, "user")

    links_row = _first_row(links) or {}
    return PersonalInfo(
        name=_text(user, "name"),
        email=_text(user, "email"),
        phone=_text(user, "phone"),
        links=ProfileLinks(
            portfolio=_optional_text(links_row, "portfolio", "website"),
            linkedin=_optional_text(links_row, "linkedin"),
            github=_optional_text(links_row, "github"),
            leetcode=_optional_text(links_row, "leetcode"),
        ),
    )


def normalize_education(rows: Any) -> List[EducationRecord]:
    """Build education records in submission order."""
    return [
        EducationRecord(
            institution=_text(row, "institution"),
            institution_location=_text(row, "institutionLocation", "institution_location", "location"),
            degree=_text(row, "degree"),
            field_of_study=_text(row, "fieldOfStudy", "field_of_study", "field"),
            start_date=_pick(row, "startDate", "start_date", default=""),
            is_current=bool(_pick(row, "isCurrent", "is_current", default=False)),
            end_date=_pick(row, "endDate", "end_date"),
            gpa=_optional_text(row, "gpa"),
        )
        for row in _rows(rows, "education")
    ]


def normalize_experience(rows: Any) -> List[ExperienceRecord]:
    """Build experience records; a string description becomes a single bullet."""
    return [
        ExperienceRecord(
            company_name=_text(row, "companyName", "company_name", "company"),
            company_location=_text(row, "companyLocation", "company_location", "location"),
            position=_text(row, "position"),
            start_date=_pick(row, "startDate", "start_date", default=""),
            is_current=bool(_pick(row, "isCurrent", "is_current", "current", default=False)),
            end_date=_pick(row, "endDate", "end_date"),
            description=_as_list(_pick(row, "description", "responsibilities")),
        )
        for row in _rows(rows, "experience")
    ]


def normalize_projects(rows: Any) -> List[ProjectRecord]:
    """
    Build project records.

    A list description becomes the bullets; a legacy string description is kept
    as the flat summary instead. Technologies given as one comma-separated
    string are split.
    """
    projects = []
    for row in _rows(rows, "projects"):
        description = _pick(row, "description", "highlights")
        summary = None
        if isinstance(description, str):
            summary = description.strip() or None
            description = []

        projects.append(
            ProjectRecord(
                title=_text(row, "title"),
                description=_as_list(description),
                technologies=_as_list(_pick(row, "technologies"), split_commas=True),
                github_url=_optional_text(row, "githubrepository", "github_url", "githubUrl"),
                live_url=_optional_text(row, "livelink", "live_url", "liveUrl"),
                summary=summary,
            )
        )
    return projects


def normalize_skills(rows: Any) -> List[SkillCategory]:
    """
    Build skill categories from the per-category skills row.

    Only the known category columns are read, in enumeration order; unknown
    columns (id, userId, timestamps) are ignored.
    """
    row = _first_row(rows)
    if row is None:
        return []

    categories = []
    for name in SkillCategoryName:
        skills = non_blank(_as_list(row.get(name.value), split_commas=True))
        if skills:
            categories.append(SkillCategory(name=name, skills=skills))
    return categories


def normalize_achievements(rows: Any) -> List[AchievementEntry]:
    """
    Build achievement entries from the achievements row's text list.

    Also accepts a bare list of strings.
    """
    if rows is None:
        return []
    if isinstance(rows, Mapping):
        texts = rows.get("text")
    else:
        rows = list(rows)
        if rows and all(isinstance(item, str) for item in rows):
            texts = rows
        else:
            row = _first_row(rows)
            texts = row.get("text") if row else None

    return [AchievementEntry.from_text(text) for text in non_blank(_as_list(texts))]


def load_resume_data(payload: Row) -> ResumeData:
    """
    Shape a full data-layer payload into ResumeData.

    Args:
        payload: Mapping with optional keys user, links, education, experience,
                 projects, skills, achievements (as returned by the data layer)

    Returns:
        ResumeData with every section normalized

    Raises:
        PreconditionViolation: If the payload or one of its rows has the wrong shape
    """
    payload = _require_mapping(payload, "payload")

    data = ResumeData(
        personal_info=normalize_personal_info(payload.get("user"), payload.get("links")),
        education=normalize_education(payload.get("education")),
        experience=normalize_experience(payload.get("experience")),
        projects=normalize_projects(payload.get("projects")),
        skills=normalize_skills(payload.get("skills")),
        achievements=normalize_achievements(payload.get("achievements")),
    )
    _log_debug(
        f"Normalized resume data: {len(data.education)} education, "
        f"{len(data.experience)} experience, {len(data.projects)} projects, "
        f"{len(data.skills)} skill categories, {len(data.achievements)} achievements"
    )
    return data


def load_resume_file(path: Union[str, Path]) -> ResumeData:
    """
    Load a YAML or JSON resume data file and normalize it.

    Args:
        path: File containing a data-layer payload

    Returns:
        ResumeData
    """
    config = OmegaConf.load(Path(path))
    payload: Dict[str, Any] = OmegaConf.to_container(config, resolve=True)
    return load_resume_data(payload)


def find_missing_sections(data: ResumeData) -> List[str]:
    """
    List recommended sections that have no data.

    Experience and achievements are optional and never reported.

    Example:
        >>> find_missing_sections(ResumeData())
        ['Personal Information', 'Education', 'Projects', 'Skills']
    """
    missing = []
    if data.personal_info is None or is_blank(data.personal_info.name):
        missing.append("Personal Information")
    if not data.education:
        missing.append("Education")
    if not data.projects:
        missing.append("Projects")
    if not any(non_blank(category.skills) for category in data.skills):
        missing.append("Skills")
    return missing
