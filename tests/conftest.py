"""
Shared fixtures for the Interview Insights tests.
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest


def make_question(text, rating=None, notes=None, skipped=False):
    """A raw question record shaped like the persistence layer's output."""
    record = {"skipped": skipped, "question": {"text": text}}
    feedback = {}
    if rating is not None:
        feedback["rating"] = rating
    if notes is not None:
        feedback["notes"] = notes
    if feedback:
        record["feedback"] = feedback
    return record


@pytest.fixture
def interview_payload():
    """An exported interview in camelCase, as the backend serializes it."""
    algorithms = {"id": "s1", "title": "Algorithms", "order": 0}
    javascript = {"id": "s2", "title": "JavaScript", "order": 1}
    return {
        "id": "int-1",
        "templateId": "tpl-1",
        "candidateName": "Sam Lee",
        "status": "in_progress",
        "overallNotes": "Solid overall.",
        "questions": [
            {
                "id": "iq-3",
                "order": 2,
                "skipped": False,
                "question": {"id": "q3", "text": "Explain the event loop in Node.js?", "section": javascript},
                "feedback": {"rating": "5.0", "notes": "Demonstrated excellent grasp of async scheduling."},
            },
            {
                "id": "iq-1",
                "order": 0,
                "skipped": False,
                "question": {"id": "q1", "text": "Implement binary search?", "section": algorithms},
                "feedback": {"rating": 2, "notes": "The candidate needs to work on recursion and dynamic programming."},
            },
            {
                "id": "iq-2",
                "order": 1,
                "skipped": True,
                "question": {"id": "q2", "text": "Design an LRU cache?", "section": algorithms},
            },
            {
                "id": "iq-4",
                "order": 3,
                "skipped": False,
                "question": {"id": "q4", "text": "What are the SOLID principles?"},
                "feedback": {"rating": 3, "notes": "Okay."},
            },
        ],
    }
