from typing import List, Optional

from fastapi import APIRouter, Query

from deps.state import State
from schemas.base import Envelope
from schemas.progress import LeaderboardEntry

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard", response_model=Envelope[List[LeaderboardEntry]])
def leaderboard(state: State, limit: Optional[int] = Query(default=None, ge=1, le=100)):
    return {"success": True, "data": state.leaderboard.top(limit)}
