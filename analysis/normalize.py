"""
Filter & normalize raw question/feedback records.

Records come straight from the persistence layer (dicts decoded from JSON or
pydantic models), so every field may be missing or oddly typed. Nothing here
raises: bad values are coerced to their defaults.
"""
import math
from collections.abc import Mapping
from typing import Any, Iterable, List

from state import QuestionFeedbackEntry


def _field(record: Any, name: str) -> Any:
    """Read a field from a mapping or an object, None if absent."""
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def coerce_rating(value: Any) -> float:
    """Turn a stored rating into a number, 0 for anything unusable."""
    # bool is an int subclass; a flag is not a rating
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        rating = float(value)
    elif isinstance(value, str):
        # Decimal columns are serialized as strings ("4.0")
        try:
            rating = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    if math.isnan(rating) or math.isinf(rating):
        return 0.0
    return rating


def coerce_notes(value: Any) -> str:
    return value if isinstance(value, str) else ""


def normalize_entries(questions: Iterable[Any]) -> List[QuestionFeedbackEntry]:
    """
    Keep the records that carry feedback and flatten them.

    A record survives when it is not skipped, has non-empty question text,
    and has a truthy rating or non-empty notes.
    """
    entries: List[QuestionFeedbackEntry] = []

    for record in questions or []:
        if _field(record, "skipped"):
            continue

        text = _field(_field(record, "question"), "text")
        if not isinstance(text, str) or not text:
            continue

        feedback = _field(record, "feedback")
        rating = coerce_rating(_field(feedback, "rating"))
        notes = coerce_notes(_field(feedback, "notes"))
        if not rating and not notes:
            continue

        entries.append(QuestionFeedbackEntry(question=text, rating=rating, notes=notes))

    return entries
