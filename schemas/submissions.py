# schemas/submissions.py
from __future__ import annotations

import math
from datetime import datetime
from typing import Any, List, Optional

from pydantic import ConfigDict, Field, field_validator

from schemas.base import CamelModel, new_id, utcnow

# ---------- Submit ----------


class SubmitRequest(CamelModel):
    problem_id: Optional[str] = None
    # left untyped so the verifier decides what counts as an integer answer
    user_answer: Any = None
    user_id: str = Field(min_length=1)
    time_taken: Optional[float] = None

    @field_validator("time_taken", mode="before")
    @classmethod
    def _loose_time_taken(cls, v: Any) -> Optional[float]:
        # informational only: anything that is not a finite number is dropped
        if isinstance(v, bool):
            return None
        try:
            v = float(v)
        except (TypeError, ValueError, OverflowError):
            return None
        return v if math.isfinite(v) else None


class FeedbackMessage(CamelModel):
    message: str
    reasoning: str
    encouragement: str


class Feedback(CamelModel):
    is_correct: bool
    user_answer: int
    correct_answer: int
    difference: int
    steps: List[str]
    explanation: FeedbackMessage


class SubmitResponse(CamelModel):
    success: bool = True
    data: Feedback
    score: int


# ---------- Audit log ----------


class SubmissionRecord(CamelModel):
    model_config = ConfigDict(from_attributes=True)
    id: str = Field(default_factory=new_id)
    user_id: str
    problem_id: str
    user_answer: int
    is_correct: bool
    time_taken: Optional[float] = None
    timestamp: datetime = Field(default_factory=utcnow)
