from __future__ import annotations


class ProblemNotFound(KeyError):
    """Raised when a problem id is not in the catalog."""

    def __init__(self, problem_id: str):
        super().__init__(problem_id)
        self.problem_id = problem_id

    def __str__(self) -> str:
        return "Problem not found"


class InvalidAnswerFormat(ValueError):
    pass


class InconsistentProblem(ValueError):
    pass


class AnswerOutOfRange(InvalidAnswerFormat):
    """A well-formed integer answer too large for the submission log."""
