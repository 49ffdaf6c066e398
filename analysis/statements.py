"""
Topic grouping, scoring and strength/gap statement building.
"""
from typing import Callable, Dict, Iterable, List, Optional

from state import QuestionFeedbackEntry, TopicGroup
from .topics import extract_topic
from .indicators import (
    extract_positive_indicators,
    extract_improvement_areas,
    first_sentence,
)

# Ratings are on a 1-5 scale
STRENGTH_THRESHOLD = 4
GAP_THRESHOLD = 2

MAX_STATEMENTS = 3
SNIPPET_MIN_LENGTH = 10


def group_by_topic(entries: Iterable[QuestionFeedbackEntry]) -> List[TopicGroup]:
    """Bucket entries by topic, topics in first-seen order."""
    buckets: Dict[str, List[QuestionFeedbackEntry]] = {}
    for entry in entries:
        buckets.setdefault(extract_topic(entry["question"]), []).append(entry)

    groups = []
    for topic, topic_entries in buckets.items():
        groups.append(TopicGroup(
            topic=topic,
            entries=topic_entries,
            average_rating=sum(e["rating"] for e in topic_entries) / len(topic_entries),
            notes=" ".join(e["notes"] for e in topic_entries if e["notes"]),
        ))
    return groups


def _build_statement(
    lead: str,
    group: TopicGroup,
    indicators: List[str],
    multiple_suffix: str,
) -> str:
    statement = lead

    if indicators:
        statement += f" - {indicators[0]}"
    elif len(group["entries"]) > 1:
        statement += multiple_suffix
    elif group["notes"]:
        snippet = first_sentence(group["notes"])
        if len(snippet) > SNIPPET_MIN_LENGTH:
            statement += f" - {snippet}"

    return statement


def build_strength(group: TopicGroup) -> str:
    return _build_statement(
        f"Strong understanding of {group['topic']}",
        group,
        extract_positive_indicators(group["notes"]),
        f" across {len(group['entries'])} different aspects",
    )


def build_gap(group: TopicGroup) -> str:
    return _build_statement(
        f"Needs improvement in {group['topic']}",
        group,
        extract_improvement_areas(group["notes"]),
        " (struggled with multiple aspects)",
    )


def classify_group(group: TopicGroup) -> Optional[str]:
    """
    "strength", "gap" or None.

    Averages strictly between the two thresholds produce nothing; only
    clearly strong or clearly weak topics are reported.
    """
    if group["average_rating"] >= STRENGTH_THRESHOLD:
        return "strength"
    if group["average_rating"] <= GAP_THRESHOLD:
        return "gap"
    return None


def rank_statements(
    statements: List[str],
    score: Callable[[str], float] = len,
    limit: int = MAX_STATEMENTS,
) -> List[str]:
    """
    Highest score first, ties keep their original order, cut to `limit`.

    The default score is string length, a rough stand-in for "most detailed";
    it says nothing about how good a statement actually is.
    """
    return sorted(statements, key=score, reverse=True)[:limit]
