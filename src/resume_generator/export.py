"""Export helpers for generated LaTeX: clipboard, .tex download, highlighted preview.

None of these change the LaTeX text. Copy and download always take the
plain builder output; the highlighted HTML is for on-screen display only.
"""

from __future__ import annotations

import os
import re
import shutil
import subprocess
import tempfile
import webbrowser
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, select_autoescape
from markupsafe import Markup, escape

from resume_generator.config import DEFAULT_FILENAME, get_output_dir
from resume_generator.logger import get_logger

logger = get_logger("export")

# Tried in order; the first one that exists and exits 0 wins
CLIPBOARD_COMMANDS: List[List[str]] = [
    ["pbcopy"],
    ["clip"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]

_TOKEN_PATTERN = re.compile(
    r'(?P<comment>%[^\n]*)'
    r'|(?P<command>\\[a-zA-Z]+\*?)'
    r'|(?P<escaped>\\.)'
    r'|(?P<math>\$[^$]*\$)'
    r'|(?P<optional>\[[^\]]*\])'
    r'|(?P<brace>[{}])'
)

_TOKEN_CLASSES = {
    "comment": "latex-comment",
    "command": "latex-command",
    "math": "latex-math",
    "optional": "latex-optional",
    "brace": "latex-brace",
}

_PREVIEW_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <title>{{ title }}</title>
  <style>
    body { font-family: monospace; background: #1e1e1e; color: #d4d4d4; margin: 0; padding: 1em; }
    pre { white-space: pre-wrap; }
    .latex-comment { color: #6a9955; }
    .latex-command { color: #569cd6; }
    .latex-brace { color: #ffd700; }
    .latex-math { color: #ce9178; }
    .latex-optional { color: #c586c0; }
  </style>
</head>
<body>
<pre><code>{{ code }}</code></pre>
</body>
</html>
"""

_env = Environment(autoescape=select_autoescape(default_for_string=True, default=True))


def _copy_with_command(text: str) -> bool:
    """Pipe text into the first working platform clipboard command."""
    data = text.encode("utf-8")
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]) is None:
            continue
        try:
            # xclip keeps a child alive to serve the selection, so its
            # output pipes must not be captured
            result = subprocess.run(
                cmd,
                input=data,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"Clipboard command {cmd[0]} failed: {e}")
            continue
        if result.returncode == 0:
            logger.debug(f"Copied {len(text)} chars with {cmd[0]}")
            return True
        logger.debug(f"Clipboard command {cmd[0]} exited with {result.returncode}")
    return False


def _copy_with_tk(text: str) -> bool:
    """Fallback: hand the text to a hidden Tk window's clipboard."""
    try:
        import tkinter
    except ImportError:
        logger.debug("tkinter not available for clipboard fallback")
        return False

    root = None
    try:
        root = tkinter.Tk()
        root.withdraw()
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update()
        return True
    except tkinter.TclError as e:
        logger.debug(f"Tk clipboard fallback failed: {e}")
        return False
    finally:
        if root is not None:
            root.destroy()


def copy_to_clipboard(text: Optional[str]) -> bool:
    """Copy text to the system clipboard.

    Tries the platform clipboard command first, then the Tk fallback.
    Never raises; returns whether the copy succeeded. Retrying is up to
    the caller.
    """
    text = text or ""
    try:
        if _copy_with_command(text):
            return True
        if _copy_with_tk(text):
            logger.debug(f"Copied {len(text)} chars with Tk fallback")
            return True
    except Exception as e:
        logger.error(f"Clipboard copy failed: {e}", exc_info=True)
        return False
    logger.warning("No clipboard mechanism succeeded")
    return False


def download_file(
    content: str,
    filename: str = DEFAULT_FILENAME,
    directory: Optional[Path] = None,
    *,
    reveal: bool = False,
) -> Path:
    """Save LaTeX content as <filename>.tex.

    The text is written to a temporary sibling file which is then renamed
    over the target, so a reader never sees a half-written file. The
    temporary file is removed on every exit path.

    Args:
        content: LaTeX source to save
        filename: Base name without extension; path separators become "-" and
            a blank or dots-only name falls back to "resume"
        directory: Target directory (defaults to the configured output dir)
        reveal: Open the saved file with the desktop's default handler

    Returns:
        Path of the written .tex file

    Raises:
        OSError: If the directory or file cannot be written
    """
    # the file always lands directly in the target directory
    base = re.sub(r"[\\/]", "-", (filename or "").strip())
    if not base.strip("."):
        base = DEFAULT_FILENAME
    target_dir = Path(directory) if directory is not None else get_output_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / f"{base}.tex"

    fd, tmp_name = tempfile.mkstemp(prefix=f".{base}.", suffix=".tmp", dir=target_dir)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        tmp_path.replace(target)
        logger.info(f"Saved LaTeX file: {target} ({len(content)} chars)")
    finally:
        if tmp_path.exists():
            tmp_path.unlink()

    if reveal:
        webbrowser.open(target.resolve().as_uri())

    return target


def highlight_latex_syntax(latex: str) -> str:
    """Tag LaTeX tokens with <span class="latex-*"> for display.

    Best-effort, single pass: comments, commands (\\word, \\word*), braces,
    inline math ($...$) and optional arguments ([...]). Escaped specials like
    \\% or \\$ stay plain text. All text is HTML-escaped.
    """
    if not latex:
        return ""

    out: List[str] = []
    pos = 0
    for m in _TOKEN_PATTERN.finditer(latex):
        out.append(str(escape(latex[pos:m.start()])))
        kind = m.lastgroup
        token = str(escape(m.group(0)))
        css = _TOKEN_CLASSES.get(kind)
        out.append(f'<span class="{css}">{token}</span>' if css else token)
        pos = m.end()
    out.append(str(escape(latex[pos:])))
    return "".join(out)


def render_preview_page(latex: str, title: str = "Resume Preview") -> str:
    """Standalone HTML page showing the highlighted LaTeX source."""
    template = _env.from_string(_PREVIEW_TEMPLATE)
    return template.render(title=title, code=Markup(highlight_latex_syntax(latex)))
