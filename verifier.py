from __future__ import annotations

import math
import re
from typing import Any

from errors import InvalidAnswerFormat
from schemas.problems import Problem
from schemas.submissions import Feedback, FeedbackMessage

# --- Parsing / validation helpers ------------------------------------------------
# stays under the interpreter's int() digit limit (4300)
LEN_LIMIT = 4000
_ANSWER_REQUIRED_MSG = "Answer required."
_INVALID_FORMAT_MSG = "Invalid answer format. Please enter a number."
_TOO_LONG_MSG = f"Answer too long (> {LEN_LIMIT})."
_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")

# --- Feedback templates -----------------------------------------------------------
_CORRECT = FeedbackMessage(
    message="Perfect! You got it right!",
    reasoning="You correctly calculated that {answer} is the answer.",
    encouragement="Great job! Keep up the excellent work!",
)
_TOO_HIGH = "Your answer is {diff} too high. Try counting more carefully!"
_TOO_LOW = "Your answer is {diff} too low. Did you count everything?"
_INCORRECT_MESSAGE = "Not quite right, but don't give up!"
_INCORRECT_ENCOURAGEMENT = "Review the steps and try again. You can do it!"


def parse_answer(raw: Any) -> int:
    """
    Parse a learner's answer as a base-10 integer.

    Accepts JSON integers, floats with an integral value (8.0) and strings of
    optionally signed digits. Anything else, including "8.5", "8 apples" and
    booleans, raises InvalidAnswerFormat.
    """
    if raw is None:
        raise InvalidAnswerFormat(_ANSWER_REQUIRED_MSG)
    if isinstance(raw, bool):
        raise InvalidAnswerFormat(_INVALID_FORMAT_MSG)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw) or not raw.is_integer():
            raise InvalidAnswerFormat(_INVALID_FORMAT_MSG)
        return int(raw)
    if not isinstance(raw, str):
        raise InvalidAnswerFormat(_INVALID_FORMAT_MSG)

    if not raw.strip():
        raise InvalidAnswerFormat(_ANSWER_REQUIRED_MSG)
    if len(raw) > LEN_LIMIT:
        raise InvalidAnswerFormat(_TOO_LONG_MSG)
    if _INT_RE.fullmatch(raw) is None:
        raise InvalidAnswerFormat(_INVALID_FORMAT_MSG)
    return int(raw)


def _explain(problem: Problem, answer: int) -> FeedbackMessage:
    delta = answer - problem.correct_answer
    if delta == 0:
        return _CORRECT.model_copy(
            update={"reasoning": _CORRECT.reasoning.format(answer=problem.correct_answer)}
        )

    hint = _TOO_HIGH if delta > 0 else _TOO_LOW
    return FeedbackMessage(
        message=_INCORRECT_MESSAGE,
        reasoning=hint.format(diff=abs(delta)),
        encouragement=_INCORRECT_ENCOURAGEMENT,
    )


def verify(problem: Problem, raw_answer: Any) -> Feedback:
    answer = parse_answer(raw_answer)
    return Feedback(
        is_correct=answer == problem.correct_answer,
        user_answer=answer,
        correct_answer=problem.correct_answer,
        difference=abs(answer - problem.correct_answer),
        steps=list(problem.steps),
        explanation=_explain(problem, answer),
    )
