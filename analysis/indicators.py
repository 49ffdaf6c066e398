"""
Pattern-based indicator extraction from interviewer notes.

Each pattern family is an ordered tuple of (compiled regex, capture group).
All matches of the first pattern come before any match of the second, and so
on; position in the text does not matter. Captures end at the next comma or
period.
"""
import re
from typing import List, Sequence, Tuple

IndicatorPattern = Tuple[re.Pattern, int]

FALLBACK_MIN_LENGTH = 15

POSITIVE_PATTERNS: Sequence[IndicatorPattern] = (
    (re.compile(r"demonstrated\s+([^.,]+)", re.IGNORECASE), 1),
    (re.compile(r"good\s+(?:understanding|grasp)\s+of\s+([^.,]+)", re.IGNORECASE), 1),
    (re.compile(r"excellent\s+([^.,]+)", re.IGNORECASE), 1),
    (re.compile(r"strong\s+([^.,]+)", re.IGNORECASE), 1),
    (re.compile(r"well[\s-]?handled\s+([^.,]+)", re.IGNORECASE), 1),
    (re.compile(r"clear[\s-]?understanding\s+of\s+([^.,]+)", re.IGNORECASE), 1),
)

IMPROVEMENT_PATTERNS: Sequence[IndicatorPattern] = (
    (re.compile(r"needs?\s+(?:to\s+)?(?:work\s+)?on\s+([^.,]+)", re.IGNORECASE), 1),
    (re.compile(r"(?:didn't|does not|struggled|weak)\s+(?:with|in|on)\s+([^.,]+)", re.IGNORECASE), 1),
    (
        re.compile(
            r"(?:unclear|incomplete|confused|limited)\s+(?:understanding|grasp)?\s+(?:of|in)?\s+([^.,]+)",
            re.IGNORECASE,
        ),
        1,
    ),
    (re.compile(r"lacking\s+([^.,]+)", re.IGNORECASE), 1),
    (re.compile(r"insufficient\s+([^.,]+)", re.IGNORECASE), 1),
)


def first_sentence(text: str) -> str:
    """Text before the first period, trimmed."""
    return (text or "").split(".", 1)[0].strip()


def extract_indicators(notes: str, patterns: Sequence[IndicatorPattern]) -> List[str]:
    """Collect every capture of every pattern, falling back to the first sentence."""
    indicators: List[str] = []

    for pattern, group in patterns:
        for match in pattern.finditer(notes or ""):
            captured = match.group(group)
            if captured:
                indicators.append(captured.strip())

    if not indicators:
        sentence = first_sentence(notes)
        if len(sentence) > FALLBACK_MIN_LENGTH:
            indicators.append(sentence)

    return indicators


def extract_positive_indicators(notes: str) -> List[str]:
    return extract_indicators(notes, POSITIVE_PATTERNS)


def extract_improvement_areas(notes: str) -> List[str]:
    return extract_indicators(notes, IMPROVEMENT_PATTERNS)
