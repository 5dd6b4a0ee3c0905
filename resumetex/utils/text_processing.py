"""
Text processing utilities shared by the templating and rendering contexts.
"""

import re
from typing import Iterable, List, Optional


def is_blank(text: Optional[str]) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    return text is None or not str(text).strip()


def non_blank(items: Optional[Iterable[str]]) -> List[str]:
    """
    Drop blank and whitespace-only entries, preserving order.

    Example:
        >>> non_blank(["Built API", "  ", "", "Shipped v2"])
        ['Built API', 'Shipped v2']
    """
    if not items:
        return []
    return [item for item in items if not is_blank(item)]


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Replaces 2 or more consecutive blank lines with max_consecutive blank lines.

    Args:
        content: The text content to normalize
        max_consecutive: Maximum number of consecutive blank lines to allow.
                        Use 0 to remove all blank lines, 1 for standard
                        normalization (default: 1)

    Returns:
        Content with normalized blank lines

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=0)
        'text\\nmore'
    """
    if max_consecutive == 0:
        # Any blank line at all
        pattern = r'\n[ \t]*\n([ \t]*\n)*'
    else:
        # Only runs of 2+ blank lines
        pattern = r'\n[ \t]*\n([ \t]*\n)+'

    replacement = '\n' * (max_consecutive + 1)

    return re.sub(pattern, replacement, content)


def line_and_column(text: str, position: int) -> tuple[int, int]:
    """
    Convert a character offset into 1-based (line, column).

    Example:
        >>> line_and_column("ab\\ncd", 3)
        (2, 1)
    """
    line = text.count("\n", 0, position) + 1
    last_newline = text.rfind("\n", 0, position)
    return line, position - last_newline
