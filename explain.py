from __future__ import annotations

from typing import List

from schemas.explain import Explanation, Visualization
from schemas.problems import Problem

BASE_CONCEPTS = ["Addition", "Subtraction", "Counting"]
MULTI_STEP_CONCEPTS = ["Multi-step Problems", "Mental Math"]


def visualization(problem: Problem) -> Visualization:
    return Visualization(
        type=problem.visual_type,
        operation="add" if problem.operation == "addition" else "subtract",
        initial_count=problem.initial_count,
        change_count=problem.change_count,
        final_count=problem.correct_answer,
    )


def hints(problem: Problem) -> List[str]:
    things = problem.visual_type
    if problem.operation == "addition":
        return [
            f"Start by counting the initial {things}",
            f"Then add the new {things} one by one",
            "Count the total at the end",
        ]
    return [
        f"Begin with the total {things}",
        f"Remove the {things} that are taken away",
        "Count what remains",
    ]


def related_concepts(problem: Problem) -> List[str]:
    concepts = list(BASE_CONCEPTS)
    if problem.difficulty in ("medium", "hard"):
        concepts.extend(MULTI_STEP_CONCEPTS)
    return concepts


def explain(problem: Problem) -> Explanation:
    return Explanation(
        steps=list(problem.steps),
        visualization=visualization(problem),
        hints=hints(problem),
        related_concepts=related_concepts(problem),
    )
