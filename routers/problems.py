# routers/problems.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException

from deps.state import State
from errors import InconsistentProblem, ProblemNotFound
from schemas.base import Envelope
from schemas.problems import Problem, ProblemIn

router = APIRouter(tags=["problems"])


@router.get("/problems", response_model=Envelope[List[Problem]])
def list_problems(state: State):
    return {"success": True, "data": state.catalog.list()}


@router.get("/problems/{problem_id}", response_model=Envelope[Problem])
def get_problem(problem_id: str, state: State):
    try:
        problem = state.catalog.get(problem_id)
    except ProblemNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True, "data": problem}


@router.post("/problems", response_model=Envelope[Problem], status_code=201)
def create_problem(req: ProblemIn, state: State):
    try:
        problem = state.catalog.create(req)
    except InconsistentProblem as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "data": problem}
