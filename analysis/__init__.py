"""
Heuristic feedback analysis for interview sections.
"""
from .feedback_analyzer import analyze_feedback
from .normalize import normalize_entries, coerce_rating
from .topics import extract_topic
from .indicators import (
    POSITIVE_PATTERNS,
    IMPROVEMENT_PATTERNS,
    extract_indicators,
    extract_positive_indicators,
    extract_improvement_areas,
)
from .statements import (
    group_by_topic,
    classify_group,
    build_strength,
    build_gap,
    rank_statements,
)

__all__ = [
    "analyze_feedback",
    "normalize_entries",
    "coerce_rating",
    "extract_topic",
    "POSITIVE_PATTERNS",
    "IMPROVEMENT_PATTERNS",
    "extract_indicators",
    "extract_positive_indicators",
    "extract_improvement_areas",
    "group_by_topic",
    "classify_group",
    "build_strength",
    "build_gap",
    "rank_statements",
]
