# schemas/problems.py
from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from schemas.base import CamelModel, new_id, utcnow

Difficulty = Literal["easy", "medium", "hard"]
Operation = Literal["addition", "subtraction"]


class ProblemIn(CamelModel):
    title: str
    story: str
    difficulty: Difficulty
    correct_answer: int
    steps: List[str] = Field(default_factory=list)
    visual_type: str
    initial_count: int
    add_count: Optional[int] = None
    remove_count: Optional[int] = None
    operation: Operation

    @property
    def change_count(self) -> int:
        if self.operation == "addition":
            return self.add_count or 0
        return self.remove_count or 0

    def expected_result(self) -> int:
        """Answer implied by the visual counts, independent of correct_answer."""
        if self.operation == "addition":
            return self.initial_count + self.change_count
        return self.initial_count - self.change_count


class Problem(ProblemIn):
    id: str = Field(default_factory=new_id)
    created_at: datetime = Field(default_factory=utcnow)
