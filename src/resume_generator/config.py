"""
Runtime settings for the resume generator.

Values come from the environment (optionally a local .env file). Nothing in
the LaTeX renderers read these; they steer the CLI, logging, export and storage.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from resume_generator.paths import DATA_DIR, GENERATED_DIR, LOG_DIR

load_dotenv()

STORAGE_KEY = "resume-generator-data"
DEFAULT_FILENAME = "resume"


def get_log_level() -> str:
    """Logging level name, defaults to INFO."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_dir() -> Path:
    return Path(os.getenv("RESUME_LOG_DIR", LOG_DIR))


def get_output_dir() -> Path:
    """Directory where generated .tex files are written."""
    return Path(os.getenv("RESUME_OUTPUT_DIR", GENERATED_DIR))


def get_storage_path() -> Path:
    """JSON file backing the draft store."""
    return Path(os.getenv("RESUME_STORAGE_PATH", DATA_DIR / "storage.json"))
