import logging
from typing import Iterable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog import ProblemCatalog, seed_problems
from config import (
    API_PREFIX,
    CORS_ORIGINS,
    DATABASE_URL,
    LEADERBOARD_SIZE,
    LOG_LEVEL,
    POINTS_PER_CORRECT,
    PROBLEMS_PATH,
    STRICT_ARITHMETIC,
)
from deps.state import AppState
from leaderboard import LeaderboardAggregator
from progress import ProgressStore

# Routers
from routers.explain import router as explain_router
from routers.health import router as health_router
from routers.leaderboard import router as leaderboard_router
from routers.problems import router as problems_router
from routers.progress import router as progress_router
from routers.submissions import router as submissions_router
from routers.submit import router as submit_router
from schemas.problems import Problem
from submissions import SubmissionLog

logger = logging.getLogger("word-problems")
logging.basicConfig(level=LOG_LEVEL)


# --- Error envelopes --------------------------------------------------------------


def _error(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"success": False, "error": message}, headers=headers
    )


async def http_error(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_error(request: Request, exc: RequestValidationError):
    parts = []
    for err in exc.errors():
        # drop the leading "body"/"query"/"path" segment
        loc = ".".join(str(p) for p in err.get("loc", ())[1:]) or "body"
        parts.append(f"{loc}: {err.get('msg')}")
    return _error(400, "; ".join(parts) or "Invalid request.")


async def unhandled_error(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return _error(500, str(exc) or type(exc).__name__)


# --- App factory ------------------------------------------------------------------


def build_state(
    problems: Optional[Iterable[Problem]] = None,
    database_url: str = DATABASE_URL,
    strict_arithmetic: bool = STRICT_ARITHMETIC,
) -> AppState:
    if problems is None:
        problems = seed_problems(PROBLEMS_PATH)
    progress = ProgressStore(points_per_correct=POINTS_PER_CORRECT)
    return AppState(
        catalog=ProblemCatalog(problems, strict_arithmetic=strict_arithmetic),
        progress=progress,
        submissions=SubmissionLog.from_url(database_url),
        leaderboard=LeaderboardAggregator(progress, size=LEADERBOARD_SIZE),
    )


def create_app(state: Optional[AppState] = None) -> FastAPI:
    app = FastAPI(title="Word Problems API")
    app.state.services = state or build_state()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials="*" not in CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error)
    app.add_exception_handler(RequestValidationError, validation_error)
    app.add_exception_handler(Exception, unhandled_error)

    # Register routers
    app.include_router(health_router)  # /, /health/db
    app.include_router(problems_router, prefix=API_PREFIX)  # /problems
    app.include_router(submit_router, prefix=API_PREFIX)  # /submit
    app.include_router(progress_router, prefix=API_PREFIX)  # /progress/{user_id}
    app.include_router(explain_router, prefix=API_PREFIX)  # /explain/{problem_id}
    app.include_router(leaderboard_router, prefix=API_PREFIX)  # /leaderboard
    app.include_router(submissions_router, prefix=API_PREFIX)  # /submissions

    logger.info("loaded %d problems (in-memory storage)", len(app.state.services.catalog))
    return app


app = create_app()
