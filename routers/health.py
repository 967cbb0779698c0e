# routers/health.py
from fastapi import APIRouter, HTTPException

from deps.state import State

router = APIRouter(tags=["health"])


@router.get("/")
def health_root(state: State):
    return {"success": True, "data": {"problems": len(state.catalog)}}


@router.get("/health/db")
def health_db(state: State):
    try:
        state.submissions.ping()
        return {"success": True}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"db_error: {type(e).__name__}: {e}")
