from fastapi import APIRouter

from deps.state import State
from schemas.base import Envelope
from schemas.progress import UserProgress

router = APIRouter(tags=["progress"])


@router.get("/progress/{user_id}", response_model=Envelope[UserProgress])
def get_progress(user_id: str, state: State):
    # Unknown users get an empty list and zeroed stats
    progress = UserProgress(
        progress=state.progress.for_user(user_id, state.catalog),
        stats=state.progress.stats_for_user(user_id),
    )
    return {"success": True, "data": progress}
