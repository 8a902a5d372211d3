"""
Form-layer helpers around ResumeData.

RESPONSIBILITY: things the editing UI needs before handing data to the
LaTeX builder
- blank defaults and ids for new list entries
- required-field validation (pure, never mutates data)
- deriving the download file name from the person's name

The LaTeX builder itself never calls these; a partially filled resume
still renders.
"""

from __future__ import annotations

import re
import time
from typing import Any, Dict, Mapping, Union

from resume_generator.config import DEFAULT_FILENAME
from resume_generator.latex.core import is_blank
from resume_generator.schema import ResumeData

FormErrors = Dict[str, Dict[str, str]]

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

# (section, attribute, form key, message) in form order
REQUIRED_FIELDS = (
    ("personalInfo", "full_name", "fullName", "Full name is required"),
    ("personalInfo", "phone", "phone", "Phone is required"),
    ("personalInfo", "email", "email", "Email is required"),
    ("education", "university_name", "universityName", "University name is required"),
    ("education", "degree", "degree", "Degree is required"),
    ("education", "expected_graduation", "expectedGraduation", "Expected graduation is required"),
    ("education", "location", "location", "Location is required"),
    ("technicalSkills", "programming_languages", "programmingLanguages", "Programming languages are required"),
    ("technicalSkills", "developer_tools", "developerTools", "Developer tools are required"),
    ("technicalSkills", "libraries_frameworks", "librariesFrameworks", "Libraries/frameworks are required"),
)

_SECTION_ATTRS = {
    "personalInfo": "personal_info",
    "education": "education",
    "technicalSkills": "technical_skills",
}


def empty_resume() -> ResumeData:
    """A blank resume with every section present and no list entries."""
    return ResumeData()


def new_entry_id() -> str:
    """Opaque id for a new work/project/leadership entry (epoch milliseconds)."""
    return str(time.time_ns() // 1_000_000)


def derive_filename(full_name: Any, default: str = DEFAULT_FILENAME) -> str:
    """Download base name: lowercase, whitespace runs to '-', only [a-z0-9-] kept.

    >>> derive_filename("John Doe")
    'john-doe'
    >>> derive_filename("  ")
    'resume'
    """
    name = str(full_name or "").lower()
    name = re.sub(r'\s+', '-', name)
    name = re.sub(r'[^a-z0-9-]', '', name)
    # a name of only separators ("  ", " ! ") has nothing to show
    if not name.strip("-"):
        return default
    return name


def validate_resume(data: Union[ResumeData, Mapping[str, Any]]) -> FormErrors:
    """
    Check the fields the form marks as required.

    Returns:
        Errors grouped by section using the camelCase form keys, e.g.
        {"personalInfo": {"email": "Invalid email format"}}. An empty dict
        means the resume is complete.
    """
    resume = data if isinstance(data, ResumeData) else ResumeData.model_validate(data)
    errors: FormErrors = {}

    for section, attr, key, message in REQUIRED_FIELDS:
        value = getattr(getattr(resume, _SECTION_ATTRS[section]), attr)
        if is_blank(value):
            errors.setdefault(section, {})[key] = message

    email = resume.personal_info.email
    if not is_blank(email) and not EMAIL_PATTERN.match(email):
        errors.setdefault("personalInfo", {})["email"] = "Invalid email format"

    return errors
