# schemas/explain.py
from __future__ import annotations

from typing import List, Literal

from schemas.base import CamelModel


class Visualization(CamelModel):
    type: str
    operation: Literal["add", "subtract"]
    initial_count: int
    change_count: int
    final_count: int


class Explanation(CamelModel):
    steps: List[str]
    visualization: Visualization
    hints: List[str]
    related_concepts: List[str]
