from __future__ import annotations

import os

# Load once at module import
API_PREFIX = os.getenv("API_PREFIX", "/api").rstrip("/")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")
PROBLEMS_PATH = os.getenv("PROBLEMS_PATH", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# If True: problems whose counts don't add up to correctAnswer are rejected on create.
# If False: they are accepted and a warning is logged.
STRICT_ARITHMETIC = os.getenv("STRICT_ARITHMETIC", "").lower() in ("1", "true", "yes", "on")

POINTS_PER_CORRECT = int(os.getenv("POINTS_PER_CORRECT", "10"))
LEADERBOARD_SIZE = int(os.getenv("LEADERBOARD_SIZE", "10"))
