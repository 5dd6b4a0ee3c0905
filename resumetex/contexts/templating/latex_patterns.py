"""
LaTeX Pattern Constants

Centralized LaTeX pattern strings used for generation and validation.
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class DocumentPatterns:
    """
    Document-level LaTeX patterns.

    Used for document boundary detection.
    """
    BEGIN_DOCUMENT: str = r'\begin{document}'
    END_DOCUMENT: str = r'\end{document}'


@dataclass(frozen=True)
class SectionPatterns:
    """
    Section headings emitted by the section templates.

    The comment banner precedes the \\section command in each fragment.
    """
    HEADING_BANNER: str = '%----------HEADING----------'
    EDUCATION: str = r'\section{Education}'
    EXPERIENCE: str = r'\section{Experience}'
    PROJECTS: str = r'\section{Projects}'
    ACHIEVEMENTS: str = r'\section{Achievements}'
    SKILLS: str = r'\section{Technical Skills}'

    @classmethod
    def all(cls) -> List[str]:
        """Return the optional section headings in emission order."""
        return [
            cls.EDUCATION,
            cls.EXPERIENCE,
            cls.PROJECTS,
            cls.ACHIEVEMENTS,
            cls.SKILLS,
        ]


@dataclass(frozen=True)
class EscapePatterns:
    """
    Character escapes for free text, applied in this order.

    Braces and backslashes are deliberately absent: the bold conversion
    inserts literal braces after this pass.
    """
    REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
        ('&', r'\&'),
        ('%', r'\%'),
        ('$', r'\$'),
        ('#', r'\#'),
        ('_', r'\_'),
        ('~', r'\textasciitilde{}'),
        ('^', r'\textasciicircum{}'),
    )


@dataclass(frozen=True)
class FormattingRegex:
    """Regex patterns for inline formatting conventions in user text."""
    # Non-greedy and single-line, so adjacent spans convert independently
    BOLD_MARKDOWN: str = r'\*\*(.*?)\*\*'
    TEXTBF: str = r'\textbf'


@dataclass(frozen=True)
class UrlPatterns:
    """Characters that must not appear raw inside an \\href target."""
    PERCENT_ENCODE: Tuple[Tuple[str, str], ...] = (
        (' ', '%20'),
        ('{', '%7B'),
        ('}', '%7D'),
    )
    ESCAPE: Tuple[Tuple[str, str], ...] = (
        ('%', r'\%'),
        ('#', r'\#'),
    )
