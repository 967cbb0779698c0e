from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request

from catalog import ProblemCatalog
from leaderboard import LeaderboardAggregator
from progress import ProgressStore
from submissions import SubmissionLog


@dataclass
class AppState:
    catalog: ProblemCatalog
    progress: ProgressStore
    submissions: SubmissionLog
    leaderboard: LeaderboardAggregator


def get_state(request: Request) -> AppState:
    """
    Stores live on the application, not the module, so every app built by
    create_app() (one per test module, one per worker) starts empty.
    """
    return request.app.state.services


State = Annotated[AppState, Depends(get_state)]
