"""
Core LaTeX helper functions for escaping and small markup pieces.

These are pure utility functions with no dependencies on the rest of the system.
"""

from typing import Any, Iterable, List

# One entry per special character. Replacements are emitted as-is and never
# scanned again, so the braces in \textbackslash{} stay unescaped.
LATEX_SPECIAL_CHARS = {
    '\\': r'\textbackslash{}',
    '{': r'\{',
    '}': r'\}',
    '$': r'\$',
    '&': r'\&',
    '%': r'\%',
    '#': r'\#',
    '^': r'\textasciicircum{}',
    '_': r'\_',
    '~': r'\textasciitilde{}',
}


def escape_latex(text: Any) -> str:
    """Escape special LaTeX characters in a single left-to-right pass.

    Each input character is looked up in LATEX_SPECIAL_CHARS and either
    replaced or copied unchanged. Because the output of a replacement is never
    looked at again, rule order cannot cause double escaping.

    None and empty input give "". Non-string values are converted with str().

    Args:
        text: Text to escape
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    if not text:
        return ""
    return "".join(LATEX_SPECIAL_CHARS.get(ch, ch) for ch in text)


def is_blank(value: Any) -> bool:
    """True for None, empty and whitespace-only strings."""
    if value is None:
        return True
    return not str(value).strip()


def filter_bullets(items: Iterable[Any]) -> List[str]:
    """Drop empty and whitespace-only entries, keeping order.

    Kept entries are returned untrimmed.
    """
    return [str(item) for item in items if not is_blank(item)]


def href(url: Any, label: str) -> str:
    """Hyperlink with an escaped target. The label is inserted verbatim."""
    return f"\\href{{{escape_latex(url)}}}{{{label}}}"


def strip_latex_comments(s: str) -> str:
    """Remove LaTeX comments but preserve newlines.

    An escaped percent sign (\\%) does not start a comment.
    """
    lines = []
    for line in s.splitlines():
        i = 0
        cut = len(line)
        while i < len(line):
            ch = line[i]
            if ch == '\\':
                i += 2
                continue
            if ch == '%':
                cut = i
                break
            i += 1
        lines.append(line[:cut])
    return "\n".join(lines)
