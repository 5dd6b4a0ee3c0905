"""
resumetex - Resume document synthesis for a personal resume builder

Turns the structured sections a user fills in (personal info, education,
experience, projects, skills, links, achievements) into a complete LaTeX
document, and checks LaTeX text for structural defects before it is handed
to a compiler.

Architecture:
- Templating Context: record normalization, escaping, section rendering, assembly
- Rendering Context: LaTeX syntax validation
"""

__version__ = "0.1.0"
