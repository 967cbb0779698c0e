# routers/submissions.py
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from deps.state import State
from schemas.base import Envelope
from schemas.submissions import SubmissionRecord

router = APIRouter(prefix="/submissions", tags=["submissions"])


@router.get("", response_model=Envelope[List[SubmissionRecord]])
def recent_submissions(
    state: State,
    limit: int = Query(default=20, ge=1, le=100),
    user_id: Optional[str] = Query(default=None, alias="userId"),
):
    return {"success": True, "data": state.submissions.recent(limit=limit, user_id=user_id)}


@router.get("/{submission_id}", response_model=Envelope[SubmissionRecord])
def get_submission(submission_id: str, state: State):
    s = state.submissions.get(submission_id)
    if not s:
        raise HTTPException(status_code=404, detail="Submission not found")
    return {"success": True, "data": s}
