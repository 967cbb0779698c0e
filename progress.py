from __future__ import annotations

import threading
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional, Tuple

from catalog import ProblemCatalog
from config import POINTS_PER_CORRECT
from schemas.base import new_id, utcnow
from schemas.progress import ProgressEntry, ProgressRecord, UserStats


class ProgressStore:
    """
    One ProgressRecord per (user_id, problem_id), updated in place.

    FastAPI runs sync endpoints in a threadpool, so the read-modify-write in
    record_attempt holds the store lock for its whole duration.
    """

    def __init__(self, points_per_correct: int = POINTS_PER_CORRECT):
        self.points_per_correct = points_per_correct
        self._records: Dict[Tuple[str, str], ProgressRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def record_attempt(self, user_id: str, problem_id: str, is_correct: bool) -> ProgressRecord:
        """Upsert the record for the pair and return a snapshot of it."""
        key = (user_id, problem_id)
        now = utcnow()
        with self._lock:
            record = self._records.get(key)
            if record is None:
                record = ProgressRecord(
                    id=new_id(), user_id=user_id, problem_id=problem_id, last_attempt=now
                )
                self._records[key] = record

            record.attempts += 1
            if is_correct:
                record.correct_attempts += 1
                record.total_score += self.points_per_correct
            record.last_attempt = now
            return record.model_copy()

    def get(self, user_id: str, problem_id: str) -> Optional[ProgressRecord]:
        with self._lock:
            record = self._records.get((user_id, problem_id))
            return record.model_copy() if record else None

    def records(self) -> List[ProgressRecord]:
        # dicts keep insertion order: first attempt of each pair comes first
        with self._lock:
            return [r.model_copy() for r in self._records.values()]

    def _user_records(self, user_id: str) -> List[ProgressRecord]:
        return [r for r in self.records() if r.user_id == user_id]

    def for_user(self, user_id: str, catalog: ProblemCatalog) -> List[ProgressEntry]:
        entries: List[ProgressEntry] = []
        for r in self._user_records(user_id):
            problem = catalog.find(r.problem_id)
            entries.append(
                ProgressEntry(**r.model_dump(), problem=problem, resolved=problem is not None)
            )
        return entries

    def stats_for_user(self, user_id: str) -> UserStats:
        records = self._user_records(user_id)
        total_score = sum(r.total_score for r in records)
        total_attempts = sum(r.attempts for r in records)
        total_correct = sum(r.correct_attempts for r in records)
        accuracy = 0.0
        if total_attempts > 0:
            # halves round up: 1 of 16 is 6.3, not 6.2
            pct = Decimal(100 * total_correct) / Decimal(total_attempts)
            accuracy = float(pct.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
        return UserStats(
            total_score=total_score,
            total_attempts=total_attempts,
            total_correct=total_correct,
            accuracy=accuracy,
        )
