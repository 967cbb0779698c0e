# schemas/progress.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from schemas.base import CamelModel
from schemas.problems import Problem


class ProgressRecord(CamelModel):
    id: str
    user_id: str
    problem_id: str
    attempts: int = 0
    correct_attempts: int = 0
    total_score: int = 0
    last_attempt: datetime


class ProgressEntry(ProgressRecord):
    # problem is None when problem_id no longer resolves against the catalog
    problem: Optional[Problem] = None
    resolved: bool


class UserStats(CamelModel):
    total_score: int
    total_attempts: int
    total_correct: int
    accuracy: float


class UserProgress(CamelModel):
    progress: List[ProgressEntry]
    stats: UserStats


class LeaderboardEntry(CamelModel):
    user_id: str
    total_score: int = 0
    total_correct: int = 0
    total_attempts: int = 0
