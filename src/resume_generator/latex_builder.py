"""
Python-based LaTeX generator for resumes.
The form layer hands over structured data, Python handles all LaTeX syntax.
"""
import logging
import re
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from resume_generator.latex.core import strip_latex_comments
from resume_generator.latex.resume_template import (
    CLOSING,
    PREAMBLE,
    build_education_section,
    build_experience_section,
    build_header,
    build_leadership_section,
    build_projects_section,
    build_skills_section,
)
from resume_generator.schema import ResumeData
from resume_generator.storage import load_resume_file

logger = logging.getLogger(__name__)

ResumeInput = Union[ResumeData, Mapping[str, Any]]

_ENV_PATTERN = re.compile(r'\\(begin|end)\{([^}]*)\}')


def _as_resume(data: ResumeInput) -> ResumeData:
    if isinstance(data, ResumeData):
        return data
    return ResumeData.model_validate(data)


class LaTeXBuilder:
    """Builds a LaTeX resume document from ResumeData.

    The builder holds no state between calls: the same input always yields
    byte-identical output.
    """

    def build_sections(self, data: ResumeInput) -> List[str]:
        """Render every section fragment in document order.

        Experience, projects and leadership come back as "" when their list
        is empty; header, education and skills are always rendered.
        """
        resume = _as_resume(data)
        return [
            build_header(resume.personal_info),
            build_education_section(resume.education),
            build_experience_section(resume.work_experience),
            build_projects_section(resume.projects),
            build_leadership_section(resume.leadership),
            build_skills_section(resume.technical_skills),
        ]

    def build_complete_resume(self, data: ResumeInput) -> str:
        """Preamble, non-empty section fragments, closing."""
        fragments = [f for f in self.build_sections(data) if f]
        latex = PREAMBLE + "".join(fragments) + CLOSING
        logger.debug(f"Built LaTeX document: {len(fragments)} sections, {len(latex)} chars")
        return latex


def build_resume_document(data: ResumeInput) -> str:
    """Render the complete, compilable LaTeX document for one resume.

    Args:
        data: ResumeData or its camelCase/snake_case dict form

    Returns:
        Complete LaTeX document as string
    """
    return LaTeXBuilder().build_complete_resume(data)


assemble = build_resume_document


def build_resume_from_json_file(json_path: Path, output_path: Optional[Path] = None) -> str:
    """
    Convenience function to build a resume from a JSON file.

    The file may hold the bare resume object or an export envelope
    ({"version": ..., "data": {...}}).

    Args:
        json_path: Path to resume JSON
        output_path: Optional path to write output .tex file

    Returns:
        Complete LaTeX document as string

    Raises:
        FileNotFoundError: If json_path does not exist
        ValueError: If the file is not valid JSON or not a JSON object
    """
    latex = build_resume_document(load_resume_file(json_path))

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(latex, encoding="utf-8")
        logger.info(f"Wrote LaTeX resume: {output_path}")

    return latex


def check_balanced(tex_content: str) -> Tuple[bool, Optional[str]]:
    """Check that braces and \\begin/\\end environments are balanced.

    Comments and escaped characters (\\{, \\}, \\%) are ignored.

    Returns:
        (is_balanced, error_message)
    """
    body = strip_latex_comments(tex_content)

    depth = 0
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == '\\':
            i += 2
            continue
        if ch == '{':
            depth += 1
        elif ch == '}':
            depth -= 1
            if depth < 0:
                return False, f"Unmatched closing brace at offset {i}"
        i += 1
    if depth != 0:
        return False, f"{depth} unclosed brace(s)"

    stack: List[str] = []
    for m in _ENV_PATTERN.finditer(body):
        kind, name = m.group(1), m.group(2)
        if kind == "begin":
            stack.append(name)
        elif not stack:
            return False, f"\\end{{{name}}} without matching \\begin"
        elif stack[-1] != name:
            return False, f"\\end{{{name}}} closes \\begin{{{stack[-1]}}}"
        else:
            stack.pop()
    if stack:
        return False, f"Unclosed environment(s): {', '.join(stack)}"

    return True, None
