"""
Interview summary assembly.

Flow:
1. Questions are ordered and grouped by section
2. Each section is analyzed independently (one worker per section)
3. Section results are put back in interview order with headline stats
"""
import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

import config
from analysis import analyze_feedback
from interviews import Interview, InterviewQuestion
from logger import get_logger
from state import InterviewStats, InterviewSummary, SectionSummary

logger = get_logger(__name__)

DEFAULT_SECTION_TITLE = "General"


def group_questions_by_section(interview: Interview) -> Dict[str, List[InterviewQuestion]]:
    """Section title -> questions, sections in the order they are first asked."""
    sections: Dict[str, List[InterviewQuestion]] = {}
    for iq in interview.ordered_questions():
        section = iq.question.section if iq.question else None
        title = section.title if section and section.title else DEFAULT_SECTION_TITLE
        sections.setdefault(title, []).append(iq)
    return sections


def compute_interview_stats(interview: Interview) -> InterviewStats:
    questions = interview.questions
    ratings = [q.feedback.rating for q in questions if q.feedback and q.feedback.rating]

    return InterviewStats(
        total_questions=len(questions),
        completed=sum(1 for q in questions if not q.skipped),
        skipped=sum(1 for q in questions if q.skipped),
        rated=len(ratings),
        average_rating=round(sum(ratings) / len(ratings), 1) if ratings else 0.0,
    )


def _summarize_section(title: str, questions: List[InterviewQuestion]) -> SectionSummary:
    analysis = analyze_feedback(title, questions)
    return SectionSummary(
        section_title=title,
        strengths=analysis["strengths"],
        gaps=analysis["gaps"],
    )


def _build_summary(interview: Interview, sections: List[SectionSummary]) -> InterviewSummary:
    return InterviewSummary(
        interview_id=interview.id,
        candidate_name=interview.candidate_name,
        status=interview.status,
        stats=compute_interview_stats(interview),
        sections=sections,
        overall_notes=interview.overall_notes,
    )


def summarize_interview(
    interview: Interview,
    max_workers: Optional[int] = None,
) -> InterviewSummary:
    """
    Build the per-interview summary.

    Sections are analyzed on a thread pool; the result lists them in
    interview order whatever order the workers finish in.
    """
    grouped = group_questions_by_section(interview)
    workers = max_workers or config.SUMMARY_WORKERS

    logger.info(
        "Summarizing interview %s: %d sections, %d workers",
        interview.id or "<no id>", len(grouped), workers,
    )

    if not grouped:
        return _build_summary(interview, [])

    with ThreadPoolExecutor(max_workers=min(workers, len(grouped))) as executor:
        sections = list(executor.map(_summarize_section, grouped.keys(), grouped.values()))

    return _build_summary(interview, sections)


async def summarize_interview_async(
    interview: Interview,
    max_workers: Optional[int] = None,
) -> InterviewSummary:
    """
    Same as summarize_interview, for callers already on an event loop.

    At most `max_workers` sections (config.SUMMARY_WORKERS by default) are
    analyzed at the same time.
    """
    grouped = group_questions_by_section(interview)
    limit = asyncio.Semaphore(max_workers or config.SUMMARY_WORKERS)

    async def run(title: str, questions: List[InterviewQuestion]) -> SectionSummary:
        async with limit:
            return await asyncio.to_thread(_summarize_section, title, questions)

    sections = await asyncio.gather(*[
        run(title, questions) for title, questions in grouped.items()
    ])

    return _build_summary(interview, list(sections))
