"""
Rendering Context

Responsibilities:
- Checks LaTeX text for structural defects before compilation
- Reports every defect found, never just the first

Owns: LaTeX syntax validation
Never: Modifies document content or invokes a compiler
"""

from resumetex.contexts.rendering.validator import ValidationResult, validate_latex

__all__ = ["validate_latex", "ValidationResult"]
