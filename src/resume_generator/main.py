#!/usr/bin/env python
"""
Resume generator command line entry point.

Usage:
    resume-generator ./my_resume.json
    resume-generator ./resume-data-2024-05-01.json --copy --highlight preview.html
    resume-generator ./my_resume.json --stdout > resume.tex
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from resume_generator.config import get_log_dir, get_log_level
from resume_generator.export import copy_to_clipboard, download_file, render_preview_page
from resume_generator.form import derive_filename, validate_resume
from resume_generator.latex_builder import build_resume_document, check_balanced
from resume_generator.logger import get_logger, init_logger
from resume_generator.storage import load_resume_file


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-generator",
        description="Generate a LaTeX resume (.tex) from resume JSON data.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write john-doe.tex into the output directory
  resume-generator ./john.json

  # Custom name and directory, also copy the source to the clipboard
  resume-generator ./john.json --filename cv --out-dir ./build --copy
        """
    )
    parser.add_argument("data", type=str, help="Resume JSON file (bare object or export envelope)")
    parser.add_argument("--out-dir", type=str, default=None, help="Directory for the .tex file")
    parser.add_argument(
        "--filename",
        type=str,
        default=None,
        help="Base file name without extension (default: derived from the full name)",
    )
    parser.add_argument("--copy", action="store_true", help="Copy the LaTeX source to the clipboard")
    parser.add_argument("--highlight", type=str, default=None, help="Write a highlighted HTML preview to this path")
    parser.add_argument("--stdout", action="store_true", help="Print the LaTeX source instead of saving a file")
    parser.add_argument("--validate", action="store_true", help="Refuse to generate when required fields are empty")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--no-log-file", action="store_true", help="Log to the console only")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the resume generator CLI."""
    args = _build_parser().parse_args(argv)
    init_logger(get_log_dir(), args.log_level or get_log_level(), log_to_file=not args.no_log_file)
    logger = get_logger("cli")

    try:
        resume = load_resume_file(Path(args.data))
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    if args.validate:
        errors = validate_resume(resume)
        if errors:
            for section, fields in errors.items():
                for field, message in fields.items():
                    print(f"[error] {section}.{field}: {message}", file=sys.stderr)
            return 2

    latex = build_resume_document(resume)
    balanced, problem = check_balanced(latex)
    if not balanced:
        logger.warning(f"Generated LaTeX looks unbalanced: {problem}")

    if args.stdout:
        sys.stdout.write(latex)
    else:
        filename = args.filename or derive_filename(resume.personal_info.full_name)
        try:
            path = download_file(latex, filename, Path(args.out_dir) if args.out_dir else None)
        except OSError as e:
            print(f"[error] Could not save the .tex file: {e}", file=sys.stderr)
            return 1
        print(path)

    if args.copy and not copy_to_clipboard(latex):
        logger.warning("Clipboard copy did not succeed, try again")

    if args.highlight:
        preview = Path(args.highlight)
        preview.parent.mkdir(parents=True, exist_ok=True)
        preview.write_text(render_preview_page(latex), encoding="utf-8")
        logger.info(f"Wrote highlighted preview: {preview}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
