"""
Text escaping for user-supplied resume content.

Free text typed into the resume forms is embedded in running text, table
cells and headings of the generated document. escape_latex() makes it safe
for those positions while keeping the **bold** convention users rely on.
"""

import re
from typing import Any

from resumetex.contexts.templating.latex_patterns import (
    EscapePatterns,
    FormattingRegex,
    UrlPatterns,
)

_BOLD_RE = re.compile(FormattingRegex.BOLD_MARKDOWN)


def escape_latex(text: Any) -> str:
    """
    Escape free text for LaTeX and convert **bold** spans to \\textbf{}.

    Escaping runs first; the bold conversion then captures its payload from
    the already-escaped string, so neither pass can corrupt the other.
    Unmatched ** markers are left as literal asterisks.

    Args:
        text: Raw user text. None or "" give ""; other types are stringified.

    Returns:
        Escaped LaTeX string

    Example:
        >>> escape_latex("Cut costs 40% & shipped **v2**")
        'Cut costs 40\\\\% \\\\& shipped \\\\textbf{v2}'
        >>> escape_latex("a **b* c")
        'a **b* c'
    """
    if text is None:
        return ""

    processed = text if isinstance(text, str) else str(text)
    if not processed:
        return ""

    for char, replacement in EscapePatterns.REPLACEMENTS:
        processed = processed.replace(char, replacement)

    return _BOLD_RE.sub(lambda match: f"{FormattingRegex.TEXTBF}{{{match.group(1)}}}", processed)


def escape_url(url: Any) -> str:
    """
    Clean a URL for use as an \\href target.

    Pasted backslashes become forward slashes, characters that would break
    brace balance or argument parsing are percent-encoded, and % / # are
    escaped for hyperref.

    Args:
        url: Raw URL (None or "" give "")

    Returns:
        URL safe to place inside \\href{...}

    Example:
        >>> escape_url("https://example.com/a b#top")
        'https://example.com/a\\\\%20b\\\\#top'
    """
    if not url:
        return ""

    cleaned = str(url).strip().replace("\\", "/")
    for char, replacement in UrlPatterns.PERCENT_ENCODE:
        cleaned = cleaned.replace(char, replacement)
    for char, replacement in UrlPatterns.ESCAPE:
        cleaned = cleaned.replace(char, replacement)

    return cleaned
