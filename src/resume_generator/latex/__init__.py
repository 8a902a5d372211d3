"""
LaTeX generation modules for the resume generator.

This package contains:
- core: Core LaTeX utilities (escaping, bullet filtering, links)
- resume_template: Document boilerplate and resume section generation functions
"""

from .core import escape_latex, filter_bullets, href, is_blank, strip_latex_comments
from .resume_template import (
    CLOSING,
    PREAMBLE,
    build_header,
    build_education_section,
    build_experience_section,
    build_projects_section,
    build_leadership_section,
    build_skills_section,
)

__all__ = [
    'escape_latex',
    'filter_bullets',
    'href',
    'is_blank',
    'strip_latex_comments',
    'PREAMBLE',
    'CLOSING',
    'build_header',
    'build_education_section',
    'build_experience_section',
    'build_projects_section',
    'build_leadership_section',
    'build_skills_section',
]
