from __future__ import annotations

from datetime import UTC, datetime
from typing import Optional

from sqlalchemy import BigInteger, Boolean, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from db import Base

# BIGINT range, the same on SQLite and Postgres
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Submission(Base):
    __tablename__ = "submissions"
    # surrogate key gives a stable insertion order for audit listings
    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(32), unique=True, index=True)
    user_id: Mapped[str] = mapped_column(String, index=True)
    problem_id: Mapped[str] = mapped_column(String)
    user_answer: Mapped[int] = mapped_column(BigInteger)
    is_correct: Mapped[bool] = mapped_column(Boolean)
    time_taken: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )
