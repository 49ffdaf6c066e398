"""
Interview Records

Data contracts and loaders for interviews exported by the persistence layer.

Usage:
    from interviews import load_interview, Interview

    # Load an exported interview (snapshots already applied)
    interview = load_interview("exports/interview_42.json")

    # Or validate a payload you already have
    interview = Interview.model_validate(payload).resolve_snapshots()
"""

from .schema import (
    InterviewStatus,
    Feedback,
    Section,
    Question,
    InterviewQuestion,
    Interview,
)

from .loader import (
    InterviewLoadError,
    parse_interview,
    load_interview,
    get_available_exports,
)

__all__ = [
    # Schema
    "InterviewStatus",
    "Feedback",
    "Section",
    "Question",
    "InterviewQuestion",
    "Interview",

    # Loader
    "InterviewLoadError",
    "parse_interview",
    "load_interview",
    "get_available_exports",
]
