"""
Resume Data Structures

Defines data classes for the records a user fills in through the resume forms.
Records arrive already authorized and validated for required fields; optional
fields may be missing and render as absent.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Dict, List, Mapping, Optional, Union

from resumetex.contexts.templating.exceptions import PreconditionViolation

DateValue = Union[str, date]


class SkillCategoryName(str, Enum):
    """
    Closed set of skill categories, in rendering order.

    Values are the keys the data layer stores skills under.
    """

    LANGUAGES = "Languages"
    VISUALIZATION = "Visualization"
    CLOUD = "Cloud"
    FRAMEWORKS = "Frameworks"
    DATABASE = "Database"
    TOOLS = "Tools"
    WEBDEVELOPMENT = "Webdevelopment"

    @property
    def label(self) -> str:
        """Human-readable heading for this category."""
        return SKILL_CATEGORY_LABELS[self]


SKILL_CATEGORY_LABELS: Dict[SkillCategoryName, str] = {
    SkillCategoryName.LANGUAGES: "Languages",
    SkillCategoryName.VISUALIZATION: "Data Analysis & Visualization",
    SkillCategoryName.CLOUD: "Cloud",
    SkillCategoryName.FRAMEWORKS: "Frameworks & Libraries",
    SkillCategoryName.DATABASE: "Database",
    SkillCategoryName.TOOLS: "Tools & Technologies",
    SkillCategoryName.WEBDEVELOPMENT: "Web Development",
}


@dataclass
class ProfileLinks:
    """
    Optional profile links shown in the heading.

    Attributes:
        portfolio: Personal website / portfolio URL
        linkedin: LinkedIn profile URL
        github: GitHub profile URL
        leetcode: LeetCode profile URL
    """

    portfolio: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    leetcode: Optional[str] = None


@dataclass
class PersonalInfo:
    """
    Personal information for the heading. Exactly one per user.

    Attributes:
        name: Full name (required, non-empty for generation)
        email: Contact email
        phone: Contact phone
        links: Optional profile links
    """

    name: str
    email: str = ""
    phone: str = ""
    links: ProfileLinks = field(default_factory=ProfileLinks)


@dataclass
class EducationRecord:
    """
    One education entry.

    Attributes:
        institution: School name
        institution_location: City / country of the school
        degree: Degree name (e.g., "B.Tech")
        field_of_study: Major (e.g., "Computer Science")
        start_date: Start date (required)
        is_current: Still enrolled
        end_date: End date (required unless current)
        gpa: Optional GPA, passed through unvalidated
    """

    institution: str
    institution_location: str
    degree: str
    field_of_study: str
    start_date: DateValue
    is_current: bool = False
    end_date: Optional[DateValue] = None
    gpa: Optional[str] = None


@dataclass
class ExperienceRecord:
    """
    One work experience entry.

    Attributes:
        company_name: Employer
        company_location: City / remote
        position: Job title
        start_date: Start date
        is_current: Current position
        end_date: End date (required unless current)
        description: Ordered bullet strings
    """

    company_name: str
    company_location: str
    position: str
    start_date: DateValue
    is_current: bool = False
    end_date: Optional[DateValue] = None
    description: List[str] = field(default_factory=list)


@dataclass
class ProjectRecord:
    """
    One project entry.

    Attributes:
        title: Project name
        description: Ordered bullet strings
        technologies: Ordered technology names
        github_url: Repository URL
        live_url: Deployed demo URL
        summary: Flat description, used as a single bullet only when
                 description has no non-blank bullets
    """

    title: str
    description: List[str] = field(default_factory=list)
    technologies: List[str] = field(default_factory=list)
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    summary: Optional[str] = None


@dataclass
class SkillCategory:
    """
    Skills listed under one category.

    Attributes:
        name: Category from the closed enumeration
        skills: Ordered skill strings
    """

    name: SkillCategoryName
    skills: List[str] = field(default_factory=list)


@dataclass
class AchievementEntry:
    """
    One achievement bullet.

    Attributes:
        title: Text before the first colon (or the whole text)
        description: Text after the first colon, stripped ("" if none)
    """

    title: str
    description: str = ""

    @classmethod
    def from_text(cls, text: str) -> "AchievementEntry":
        """
        Split free text on its first colon.

        Example:
            >>> AchievementEntry.from_text("Hackathon Winner: Smart India 2023")
            AchievementEntry(title='Hackathon Winner', description='Smart India 2023')
            >>> AchievementEntry.from_text("Dean's List")
            AchievementEntry(title="Dean's List", description='')
        """
        text = "" if text is None else str(text)
        if ":" not in text:
            return cls(title=text.strip())
        title, description = text.split(":", 1)
        return cls(title=title.strip(), description=description.strip())


@dataclass(frozen=True)
class SectionSelection:
    """
    Render-time inclusion flags for experience and project entries.

    Keys are positions in the record lists; any index without an entry is
    included. Keys and flags are coerced on construction (string indices
    become ints, flags become bools). Instances are immutable; use
    with_experience()/with_project() to derive a new selection.

    Attributes:
        experiences: Index -> included flag for experience records
        projects: Index -> included flag for project records
    """

    experiences: Mapping[int, bool] = field(default_factory=dict)
    projects: Mapping[int, bool] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "experiences", _coerce_flags(self.experiences, "selection.experiences"))
        object.__setattr__(self, "projects", _coerce_flags(self.projects, "selection.projects"))

    @classmethod
    def from_dict(cls, data: Optional[Mapping] = None) -> "SectionSelection":
        """
        Build a selection from a plain mapping.

        Two shapes are accepted:
        - {"experiences": {...}, "projects": {...}}: one flag map per collection
        - {1: False, ...}: a flat index map applied to both collections

        Keys may be ints or stringified ints (checkbox maps from the UI are
        keyed by stringified index).

        Raises:
            PreconditionViolation: If a key is neither a collection name nor an index

        Example:
            >>> SectionSelection.from_dict({1: False}).includes_experience(1)
            False
        """
        if not data:
            return cls()

        if SELECTION_KEYS & set(data):
            unknown = set(data) - SELECTION_KEYS
            if unknown:
                raise PreconditionViolation(
                    f"Unknown selection keys: {sorted(map(str, unknown))}",
                    field_name="selection",
                )
            return cls(
                experiences=data.get("experiences") or {},
                projects=data.get("projects") or {},
            )

        flags = _coerce_flags(data, "selection")
        return cls(experiences=flags, projects=flags)

    def includes_experience(self, index: int) -> bool:
        return self.experiences.get(index, True)

    def includes_project(self, index: int) -> bool:
        return self.projects.get(index, True)

    def with_experience(self, index: int, included: bool) -> "SectionSelection":
        return replace(self, experiences={**self.experiences, index: included})

    def with_project(self, index: int, included: bool) -> "SectionSelection":
        return replace(self, projects={**self.projects, index: included})


SELECTION_KEYS = frozenset({"experiences", "projects"})


def _coerce_flags(flags: Optional[Mapping], field_name: str) -> Dict[int, bool]:
    if not flags:
        return {}
    if not isinstance(flags, Mapping):
        raise PreconditionViolation(
            f"Expected an index -> flag mapping, got {type(flags).__name__}",
            field_name=field_name,
        )
    try:
        return {int(index): bool(included) for index, included in flags.items()}
    except (TypeError, ValueError) as e:
        raise PreconditionViolation(
            f"Selection keys must be record indices ({e})", field_name=field_name
        ) from e


@dataclass
class ResumeData:
    """
    Everything needed to assemble one user's resume.

    Attributes:
        personal_info: Heading data (None if the user has not filled it in)
        education: Education records in submission order
        experience: Experience records in submission order
        projects: Project records in submission order
        skills: Skill categories
        achievements: Achievement entries
    """

    personal_info: Optional[PersonalInfo] = None
    education: List[EducationRecord] = field(default_factory=list)
    experience: List[ExperienceRecord] = field(default_factory=list)
    projects: List[ProjectRecord] = field(default_factory=list)
    skills: List[SkillCategory] = field(default_factory=list)
    achievements: List[AchievementEntry] = field(default_factory=list)
