"""
Shared utilities for resumetex.

Common functionality used across contexts:
- Logger setup
- Text processing
- Timestamps for log directories
"""

from resumetex.utils.timestamp import now

__all__ = ["now"]
