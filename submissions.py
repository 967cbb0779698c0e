from __future__ import annotations

import logging
import threading
from typing import List, Optional

from sqlalchemy import select, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from db import Base, make_engine
from errors import AnswerOutOfRange
from models import INT64_MAX, INT64_MIN, Submission
from schemas.submissions import SubmissionRecord

logger = logging.getLogger(__name__)


class SubmissionLog:
    """Append-only audit trail of answer events."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
        self._lock = threading.Lock()
        Base.metadata.create_all(engine)

    @classmethod
    def from_url(cls, url: str) -> "SubmissionLog":
        return cls(make_engine(url))

    def append(self, submission: SubmissionRecord) -> SubmissionRecord:
        if not INT64_MIN <= submission.user_answer <= INT64_MAX:
            raise AnswerOutOfRange("Answer is out of range.")
        row = Submission(**submission.model_dump())
        with self._lock, self.SessionLocal() as db:
            db.add(row)
            db.commit()
        logger.debug(
            "submission %s user=%s problem=%s correct=%s",
            submission.id,
            submission.user_id,
            submission.problem_id,
            submission.is_correct,
        )
        return submission

    def recent(self, limit: int = 20, user_id: Optional[str] = None) -> List[SubmissionRecord]:
        stmt = select(Submission).order_by(Submission.pk.desc()).limit(limit)
        if user_id is not None:
            stmt = stmt.where(Submission.user_id == user_id)
        with self._lock, self.SessionLocal() as db:
            rows = db.scalars(stmt).all()
            return [SubmissionRecord.model_validate(r) for r in rows]

    def get(self, submission_id: str) -> Optional[SubmissionRecord]:
        with self._lock, self.SessionLocal() as db:
            row = db.scalars(select(Submission).where(Submission.id == submission_id)).first()
            return SubmissionRecord.model_validate(row) if row else None

    def ping(self) -> None:
        with self._lock, self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
