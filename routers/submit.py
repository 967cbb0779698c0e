# routers/submit.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException

from deps.state import State
from errors import AnswerOutOfRange, InvalidAnswerFormat, ProblemNotFound
from schemas.submissions import SubmissionRecord, SubmitRequest, SubmitResponse
from verifier import parse_answer, verify

router = APIRouter(tags=["submit"])


@router.post("/submit", response_model=SubmitResponse)
def submit(req: SubmitRequest, state: State):
    # Answer format is checked before the problem lookup, as clients expect
    try:
        answer = parse_answer(req.user_answer)
    except InvalidAnswerFormat as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        problem = state.catalog.get(req.problem_id)
    except ProblemNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

    feedback = verify(problem, answer)

    # Log first: if the insert fails, progress is left untouched
    try:
        state.submissions.append(
            SubmissionRecord(
                user_id=req.user_id,
                problem_id=problem.id,
                user_answer=answer,
                is_correct=feedback.is_correct,
                time_taken=req.time_taken,
            )
        )
    except AnswerOutOfRange as e:
        raise HTTPException(status_code=400, detail=str(e))
    record = state.progress.record_attempt(req.user_id, problem.id, feedback.is_correct)

    return SubmitResponse(data=feedback, score=record.total_score)
