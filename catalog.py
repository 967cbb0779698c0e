# catalog.py

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from errors import InconsistentProblem, ProblemNotFound
from schemas.base import new_id, utcnow
from schemas.problems import Problem, ProblemIn
from seed import PROBLEMS as SEED_PROBLEMS

logger = logging.getLogger(__name__)

DIFFICULTY_RANK = {"easy": 1, "medium": 2, "hard": 3}


def _iter_jsonl(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        for idx, line in enumerate(f, 1):
            s = line.strip()
            if not s or s.startswith("#") or s.startswith("//"):
                continue
            try:
                yield json.loads(s)
            except json.JSONDecodeError:
                logger.warning("skipping malformed line %d in %s", idx, p)
                continue


def _iter_json(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError:
            logger.warning("ignoring unreadable problem file %s", p)
            data = []
    if isinstance(data, list):
        yield from data


def _problem_from_raw(raw: Any) -> Optional[Problem]:
    if not isinstance(raw, dict):
        return None
    raw = dict(raw)
    # accept Mongo-style exports
    if "_id" in raw:
        raw.setdefault("id", raw.pop("_id"))
    raw.setdefault("id", new_id())
    raw.setdefault("createdAt", utcnow())
    try:
        return Problem.model_validate(raw)
    except ValidationError:
        return None


def load_problems(path: Path) -> List[Problem]:
    """Read problems from a .json/.jsonl file or a directory of them.

    Invalid records are skipped rather than failing the whole load.
    """
    if path.is_dir():
        files = [p for p in sorted(path.rglob("*")) if p.is_file()]
    else:
        files = [path] if path.exists() else []

    problems: List[Problem] = []
    for p in files:
        suf = p.suffix.lower()
        if suf == ".jsonl":
            source = _iter_jsonl(p)
        elif suf == ".json":
            source = _iter_json(p)
        else:
            continue

        for raw in source:
            problem = _problem_from_raw(raw)
            if problem is None:
                logger.warning("skipping invalid problem record in %s", p)
                continue
            problems.append(problem)
    return problems


def seed_problems(path: Optional[str] = None) -> List[Problem]:
    problems: List[Problem] = []
    if path:
        problems = load_problems(Path(path))
        if not problems:
            logger.warning("no valid problems found at %s, using built-in set", path)

    # Fallback to the built-in set if nothing valid loaded
    if not problems:
        problems = [Problem.model_validate(raw) for raw in SEED_PROBLEMS]
    return problems


class ProblemCatalog:
    def __init__(self, problems: Iterable[Problem] = (), strict_arithmetic: bool = False):
        self._problems: List[Problem] = list(problems)
        self._lock = threading.Lock()
        self.strict_arithmetic = strict_arithmetic

    def __len__(self) -> int:
        return len(self._problems)

    def list(self) -> List[Problem]:
        # sorted() is stable, so ties keep insertion order
        with self._lock:
            snapshot = list(self._problems)
        return sorted(snapshot, key=lambda p: DIFFICULTY_RANK[p.difficulty])

    def find(self, problem_id: Optional[str]) -> Optional[Problem]:
        if not problem_id:
            return None
        return next((p for p in self._problems if p.id == problem_id), None)

    def get(self, problem_id: Optional[str]) -> Problem:
        problem = self.find(problem_id)
        if problem is None:
            raise ProblemNotFound(problem_id or "")
        return problem

    def create(self, data: ProblemIn) -> Problem:
        expected = data.expected_result()
        if expected != data.correct_answer:
            if self.strict_arithmetic:
                raise InconsistentProblem(
                    f"correctAnswer {data.correct_answer} does not match the counts "
                    f"(expected {expected})."
                )
            logger.warning(
                "problem %r has correctAnswer %d but its counts give %d",
                data.title,
                data.correct_answer,
                expected,
            )

        fields = data.model_dump(exclude={"id", "created_at"})
        problem = Problem(id=new_id(), created_at=utcnow(), **fields)
        with self._lock:
            self._problems.append(problem)
        logger.info("created problem %s (%s)", problem.id, problem.title)
        return problem
