"""Custom exceptions for the templating context."""

from pathlib import Path
from typing import Optional


class PreconditionViolation(ValueError):
    """
    Raised when a caller passes input that breaks an entry point's contract.

    Examples are assembling a resume without a name, or validating something
    that is not a string. These are never recovered from on the caller's
    behalf (no placeholder name is invented); the caller must fix the input.

    Attributes:
        message: Error description
        field_name: Name of the offending input, when there is one
    """

    def __init__(self, message: str, field_name: Optional[str] = None):
        self.message = message
        self.field_name = field_name

        if field_name:
            super().__init__(f"{message} (field: {field_name})")
        else:
            super().__init__(message)


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        type_name: Name of the section type being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.type_name = type_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if type_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Type: {type_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
