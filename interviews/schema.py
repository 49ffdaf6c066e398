"""
Interview Record Schema

Data contracts for interview records as the persistence layer exports them.
The analysis only reads these; nothing here talks to a database.

Key concepts:
- Interview: one session of a candidate against a template
- InterviewQuestion: a question asked in the session, with its feedback
- Question snapshot: a JSON copy of the question taken when the session was
  created, used once the live question is gone or the interview is complete
"""

import json
from enum import Enum
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from analysis.normalize import coerce_rating


class InterviewStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABORTED = "aborted"
    DRAFT = "draft"


class RecordModel(BaseModel):
    """Accepts camelCase (exported JSON) and snake_case field names."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Feedback(RecordModel):
    id: Optional[str] = None
    notes: Optional[str] = None
    rating: Optional[float] = None  # 1-5, stored as a decimal

    @field_validator("rating", mode="before")
    @classmethod
    def _coerce_rating(cls, value: Any) -> Optional[float]:
        # Unusable ratings count as 0 instead of failing the whole interview
        return None if value is None else coerce_rating(value)

    @field_validator("notes", mode="before")
    @classmethod
    def _coerce_notes(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None


class Section(RecordModel):
    id: Optional[str] = None
    title: str = ""
    order: int = 0


class Question(RecordModel):
    id: Optional[str] = None
    text: Optional[str] = None
    code_snippet: Optional[str] = None
    code_language: Optional[str] = None
    difficulty: Optional[str] = None
    expected_answer: Optional[str] = None
    section: Optional[Section] = None


class InterviewQuestion(RecordModel):
    id: Optional[str] = None
    question_id: Optional[str] = None
    order: int = 0
    skipped: bool = False
    question_snapshot: Optional[str] = None  # JSON-encoded Question fields
    question: Optional[Question] = None
    feedback: Optional[Feedback] = None

    def snapshot_data(self) -> Optional[Dict[str, Any]]:
        """Decoded snapshot, None when absent or unreadable."""
        if not self.question_snapshot:
            return None
        try:
            data = json.loads(self.question_snapshot)
        except json.JSONDecodeError:
            return None
        return data if isinstance(data, dict) else None

    def resolved_question(self, status: str) -> Optional[Question]:
        """
        The question as it was asked.

        The snapshot wins when the live question was deleted or the interview
        is completed; otherwise the live question is returned unchanged.
        """
        if not self.question_snapshot:
            return self.question
        if self.question is not None and status != InterviewStatus.COMPLETED.value:
            return self.question

        snapshot = self.snapshot_data()
        if snapshot is None:
            return self.question
        try:
            snapshot_question = Question.model_validate(snapshot)
        except ValidationError:
            return self.question

        if self.question is None:
            return snapshot_question

        merged = self.question.model_dump()
        merged.update(snapshot_question.model_dump(exclude_unset=True))
        return Question.model_validate(merged)


class Interview(RecordModel):
    id: Optional[str] = None
    template_id: Optional[str] = None
    candidate_name: Optional[str] = None
    # Free-form in storage; InterviewStatus lists the values the app writes
    status: str = InterviewStatus.IN_PROGRESS.value
    overall_notes: Optional[str] = None
    questions: List[InterviewQuestion] = Field(default_factory=list)

    def ordered_questions(self) -> List[InterviewQuestion]:
        return sorted(self.questions, key=lambda q: q.order)

    def resolve_snapshots(self) -> "Interview":
        """Copy of the interview with every question's snapshot applied."""
        questions = [
            q.model_copy(update={"question": q.resolved_question(self.status)})
            for q in self.questions
        ]
        return self.model_copy(update={"questions": questions})
