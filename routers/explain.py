from fastapi import APIRouter, HTTPException

from deps.state import State
from errors import ProblemNotFound
from explain import explain
from schemas.base import Envelope
from schemas.explain import Explanation

router = APIRouter(tags=["explain"])


@router.get("/explain/{problem_id}", response_model=Envelope[Explanation])
def explain_problem(problem_id: str, state: State):
    try:
        problem = state.catalog.get(problem_id)
    except ProblemNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True, "data": explain(problem)}
