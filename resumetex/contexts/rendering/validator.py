"""
LaTeX syntax validation.

Cheap structural checks run on document text before it is handed to a LaTeX
compiler: brace balance and the presence of the document environment. The
text does not have to come from the assembler.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from resumetex.contexts.rendering.logger import (
    _log_debug,
    log_validation_result,
    log_validation_start,
)
from resumetex.contexts.templating.exceptions import PreconditionViolation
from resumetex.contexts.templating.latex_patterns import DocumentPatterns
from resumetex.utils.text_processing import line_and_column

VALID_MESSAGE = "LaTeX syntax appears valid"
UNMATCHED_CLOSING_BRACE = "Unmatched closing brace }"
UNCLOSED_OPENING_BRACES = "{count} unclosed opening brace(s) {{"
MISSING_BEGIN_DOCUMENT = f"Missing {DocumentPatterns.BEGIN_DOCUMENT} marker"
MISSING_END_DOCUMENT = f"Missing {DocumentPatterns.END_DOCUMENT} marker"


@dataclass
class ValidationResult:
    """
    Result of LaTeX syntax validation.

    Attributes:
        valid: True only when no problems were found
        errors: Every problem found, in check order
        message: Informational message (only when valid)
    """

    valid: bool
    errors: List[str] = field(default_factory=list)
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping: {"valid", "errors"} plus "message" when valid."""
        result: Dict[str, Any] = {"valid": self.valid, "errors": list(self.errors)}
        if self.message:
            result["message"] = self.message
        return result


def check_brace_balance(text: str) -> List[str]:
    """
    Scan braces character by character.

    The first closing brace without an opener is reported once; later stray
    closers are not reported separately and do not affect the depth count.
    Openers still outstanding at the end are reported as one count.

    Example:
        >>> check_brace_balance("}{}}")
        ['Unmatched closing brace }']
        >>> check_brace_balance("{{}")
        ['1 unclosed opening brace(s) {']
    """
    errors = []
    depth = 0
    first_unmatched = None

    for position, char in enumerate(text):
        if char == "{":
            depth += 1
        elif char == "}":
            if depth == 0:
                if first_unmatched is None:
                    first_unmatched = position
                continue
            depth -= 1

    if first_unmatched is not None:
        line, column = line_and_column(text, first_unmatched)
        _log_debug(f"First unmatched closing brace at line {line}, column {column}")
        errors.append(UNMATCHED_CLOSING_BRACE)

    if depth > 0:
        errors.append(UNCLOSED_OPENING_BRACES.format(count=depth))

    return errors


def check_document_markers(text: str) -> List[str]:
    """Report each missing document-environment marker separately."""
    errors = []
    if DocumentPatterns.BEGIN_DOCUMENT not in text:
        errors.append(MISSING_BEGIN_DOCUMENT)
    if DocumentPatterns.END_DOCUMENT not in text:
        errors.append(MISSING_END_DOCUMENT)
    return errors


def validate_latex(document_text: str, source: str = "document text") -> ValidationResult:
    """
    Validate LaTeX document text.

    All checks run and every problem is collected; malformed text never raises.

    Args:
        document_text: LaTeX source to check
        source: Label used in log messages (e.g., a file name)

    Returns:
        ValidationResult

    Raises:
        PreconditionViolation: If document_text is not a string

    Example:
        >>> validate_latex("\\\\begin{document}{}\\\\end{document}").to_dict()
        {'valid': True, 'errors': [], 'message': 'LaTeX syntax appears valid'}
        >>> validate_latex("no markers here").errors
        ['Missing \\\\begin{document} marker', 'Missing \\\\end{document} marker']
    """
    if not isinstance(document_text, str):
        raise PreconditionViolation(
            f"LaTeX code is required (got {type(document_text).__name__})",
            field_name="document_text",
        )

    log_validation_start(source, len(document_text))

    errors = check_brace_balance(document_text) + check_document_markers(document_text)

    if errors:
        result = ValidationResult(valid=False, errors=errors)
    else:
        result = ValidationResult(valid=True, message=VALID_MESSAGE)

    log_validation_result(source, result)
    return result
