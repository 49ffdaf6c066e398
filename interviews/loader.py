"""
Interview Loader

Utilities for loading exported interviews from JSON files.
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

import config
from logger import get_logger
from .schema import Interview

logger = get_logger(__name__)


class InterviewLoadError(Exception):
    """An export exists but does not hold a readable interview."""


def parse_interview(data) -> Interview:
    """
    Validate an exported payload and apply question snapshots.

    Accepts a bare interview object or one wrapped as {"interview": {...}}.
    """
    if isinstance(data, dict) and isinstance(data.get("interview"), dict):
        data = data["interview"]

    try:
        interview = Interview.model_validate(data)
    except ValidationError as e:
        raise InterviewLoadError(f"Invalid interview record: {e}") from e

    return interview.resolve_snapshots()


def load_interview(json_path: Union[str, Path]) -> Interview:
    """Load one interview from a JSON export."""
    path = Path(json_path)
    if not path.exists():
        raise FileNotFoundError(f"Interview export not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InterviewLoadError(f"{path} is not valid JSON: {e}") from e

    interview = parse_interview(data)
    logger.info(
        "Loaded interview %s (%d questions) from %s",
        interview.id or "<no id>", len(interview.questions), path,
    )
    return interview


def get_available_exports(directory: Optional[Union[str, Path]] = None) -> List[str]:
    """List export names (file stems) in the exports directory."""
    exports_dir = Path(directory) if directory else config.EXPORTS_DIR
    if not exports_dir.is_dir():
        return []
    return sorted(f.stem for f in exports_dir.glob("*.json"))
