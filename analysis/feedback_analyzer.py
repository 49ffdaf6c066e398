"""
Feedback Analyzer - heuristic strengths/gaps for one interview section.

Pipeline:
1. Filter & normalize the section's question records
2. Group entries by topic and average their ratings
3. Build a strength (avg >= 4) or gap (avg <= 2) statement per topic
4. Rank by length and keep the top 3 of each

Pure and stateless: no I/O, safe to call from several threads at once.
"""
from typing import Any, Callable, Iterable

from logger import get_logger
from state import FeedbackAnalysis, empty_analysis
from .normalize import normalize_entries
from .statements import (
    group_by_topic,
    classify_group,
    build_strength,
    build_gap,
    rank_statements,
)

logger = get_logger(__name__)


def analyze_feedback(
    section_title: str,
    questions: Iterable[Any],
    score: Callable[[str], float] = len,
) -> FeedbackAnalysis:
    """
    Summarize interviewer feedback for a section into strengths and gaps.

    Args:
        section_title: Section name, only used for logging
        questions: Records with `skipped`, `question.text`, `feedback.rating`
            and `feedback.notes` (mappings or objects, any field may be missing)
        score: Ranking function for statements, string length by default

    Returns:
        {"strengths": [...], "gaps": [...]}, each at most 3 long
    """
    entries = normalize_entries(questions)
    if not entries:
        logger.debug("Section %r has no rated or annotated questions", section_title)
        return empty_analysis()

    strengths = []
    gaps = []

    groups = group_by_topic(entries)
    for group in groups:
        kind = classify_group(group)
        if kind == "strength":
            strengths.append(build_strength(group))
        elif kind == "gap":
            gaps.append(build_gap(group))

    logger.debug(
        "Section %r: %d entries, %d topics, %d strengths, %d gaps",
        section_title, len(entries), len(groups), len(strengths), len(gaps),
    )

    return FeedbackAnalysis(
        strengths=rank_statements(strengths, score=score),
        gaps=rank_statements(gaps, score=score),
    )
