"""Centralized path management for the resume generator.

All default locations should be imported from this module to ensure consistency.
"""
from __future__ import annotations

from pathlib import Path

# Resolve once, reuse everywhere
PROJECT_ROOT = Path(__file__).resolve().parents[2]
OUTPUT_DIR = PROJECT_ROOT / "output"
GENERATED_DIR = OUTPUT_DIR / "generated"
LOG_DIR = OUTPUT_DIR / "logs"
DATA_DIR = OUTPUT_DIR / "data"
