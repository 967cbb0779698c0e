from __future__ import annotations

from typing import Dict, List, Optional

from config import LEADERBOARD_SIZE
from progress import ProgressStore
from schemas.progress import LeaderboardEntry


class LeaderboardAggregator:
    """Per-user totals derived from the progress store on every call."""

    def __init__(self, store: ProgressStore, size: int = LEADERBOARD_SIZE):
        self.store = store
        self.size = size

    def totals(self) -> List[LeaderboardEntry]:
        by_user: Dict[str, LeaderboardEntry] = {}
        for r in self.store.records():
            entry = by_user.get(r.user_id)
            if entry is None:
                entry = by_user[r.user_id] = LeaderboardEntry(user_id=r.user_id)
            entry.total_score += r.total_score
            entry.total_correct += r.correct_attempts
            entry.total_attempts += r.attempts
        return list(by_user.values())

    def top(self, n: Optional[int] = None) -> List[LeaderboardEntry]:
        n = self.size if n is None else n
        if n <= 0:
            return []
        # stable sort: equal scores stay in the order users first appeared
        ranked = sorted(self.totals(), key=lambda e: e.total_score, reverse=True)
        return ranked[:n]
