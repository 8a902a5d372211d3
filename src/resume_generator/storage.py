"""Draft storage and JSON export/import for resume data.

ResumeStore is a small key-value store backed by one JSON file, holding the
current draft under a single fixed key. The form layer owns its lifecycle:
load on start, save on change, clear on reset.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from resume_generator.config import STORAGE_KEY, get_storage_path
from resume_generator.logger import get_logger
from resume_generator.schema import ResumeData

logger = get_logger("storage")

EXPORT_VERSION = "1.0"


class ResumeStore:
    """JSON-file key-value store for the resume draft."""

    def __init__(self, path: Optional[Path] = None, key: str = STORAGE_KEY):
        self.path = Path(path) if path is not None else get_storage_path()
        self.key = key

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        content = self.path.read_text(encoding="utf-8").strip()
        if not content:
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Storage file {self.path} is not valid JSON: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Storage file {self.path} must hold an object, got {type(data).__name__}")
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            temp_file.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
            temp_file.replace(self.path)
        finally:
            if temp_file.exists():
                temp_file.unlink()

    def load(self) -> Optional[ResumeData]:
        """Saved draft, or None when nothing usable is stored."""
        raw = self._read_all().get(self.key)
        if raw is None:
            return None
        try:
            return ResumeData.from_dict(raw)
        except ValidationError as e:
            logger.error(f"Stored resume data is corrupted, ignoring it: {e}")
            return None

    def save(self, data: ResumeData) -> None:
        everything = self._read_all()
        everything[self.key] = data.to_dict()
        self._write_all(everything)
        logger.debug(f"Saved resume draft to {self.path}")

    def clear(self) -> None:
        everything = self._read_all()
        if everything.pop(self.key, None) is not None:
            self._write_all(everything)
            logger.debug(f"Cleared resume draft from {self.path}")


def export_data(data: ResumeData, now: Optional[datetime] = None) -> str:
    """Serialize a resume into the versioned export envelope."""
    now = now or datetime.now(timezone.utc)
    envelope = {
        "version": EXPORT_VERSION,
        "timestamp": now.isoformat(),
        "data": data.to_dict(),
    }
    return json.dumps(envelope, indent=2, ensure_ascii=False)


def export_filename(now: Optional[datetime] = None) -> str:
    """e.g. resume-data-2024-05-01.json"""
    now = now or datetime.now(timezone.utc)
    return f"resume-data-{now.date().isoformat()}.json"


def import_data(content: str) -> ResumeData:
    """
    Parse an export envelope back into ResumeData.

    Raises:
        ValueError: If the content is not JSON or lacks data.personalInfo
    """
    try:
        envelope = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid file format: {e}") from e

    payload = envelope.get("data") if isinstance(envelope, dict) else None
    if not isinstance(payload, dict) or not payload.get("personalInfo"):
        raise ValueError("Invalid file format")

    try:
        return ResumeData.from_dict(payload)
    except ValidationError as e:
        raise ValueError(f"Invalid file format: {e}") from e


def load_resume_file(json_path: Path) -> ResumeData:
    """
    Load resume data from a JSON file.

    The file may hold the bare resume object or an export envelope
    ({"version": ..., "data": {...}}).

    Raises:
        FileNotFoundError: If json_path does not exist
        ValueError: If the file is not valid JSON, not an object, or has the wrong shape
    """
    json_path = Path(json_path)
    if not json_path.exists():
        raise FileNotFoundError(f"Resume JSON not found: {json_path}")

    try:
        payload = json.loads(json_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_path}: {e}") from e

    if not isinstance(payload, dict):
        raise ValueError(f"Resume JSON must be an object, got {type(payload).__name__}")
    if isinstance(payload.get("data"), dict) and "personalInfo" in payload["data"]:
        payload = payload["data"]

    return ResumeData.from_dict(payload)
