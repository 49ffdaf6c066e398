"""
State definitions for the Interview Insights feedback analysis.
"""
from typing import TypedDict, List, Optional


class QuestionFeedbackEntry(TypedDict):
    question: str
    rating: float  # 0 when the interviewer left no rating
    notes: str


class TopicGroup(TypedDict):
    topic: str
    entries: List[QuestionFeedbackEntry]
    average_rating: float
    notes: str  # Non-empty notes joined with a single space


class FeedbackAnalysis(TypedDict):
    strengths: List[str]  # At most 3, longest first
    gaps: List[str]  # At most 3, longest first


class SectionSummary(TypedDict):
    section_title: str
    strengths: List[str]
    gaps: List[str]


class InterviewStats(TypedDict):
    total_questions: int
    completed: int
    skipped: int
    rated: int
    average_rating: float  # Over rated questions, one decimal


class InterviewSummary(TypedDict):
    # Interview metadata
    interview_id: Optional[str]
    candidate_name: Optional[str]
    status: str

    # Headline numbers
    stats: InterviewStats

    # Per-section analysis, in interview order
    sections: List[SectionSummary]

    overall_notes: Optional[str]


def empty_analysis() -> FeedbackAnalysis:
    """Result returned when a section has nothing to analyze."""
    return FeedbackAnalysis(strengths=[], gaps=[])
