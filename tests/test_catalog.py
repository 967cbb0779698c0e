import json

import pytest

from catalog import ProblemCatalog, load_problems, seed_problems
from errors import InconsistentProblem, ProblemNotFound
from schemas.problems import ProblemIn

RECORD = {
    "title": "Birds",
    "story": "There are 9 birds on a fence. 4 fly away. How many are left?",
    "difficulty": "easy",
    "correctAnswer": 5,
    "steps": ["Start with 9 birds", "Take away 4", "9 - 4 = 5"],
    "visualType": "birds",
    "initialCount": 9,
    "removeCount": 4,
    "operation": "subtraction",
}


def test_seed_has_builtin_problems():
    titles = [p.title for p in seed_problems()]
    assert titles == ["Apple Basket", "Cookie Jar", "Toy Cars", "Gift Boxes"]


def test_builtin_problems_are_consistent():
    for p in seed_problems():
        assert p.expected_result() == p.correct_answer


def test_load_jsonl_skips_bad_rows(tmp_path):
    f = tmp_path / "problems.jsonl"
    f.write_text(
        "\n".join(
            [
                "# comment",
                json.dumps(dict(RECORD, _id="birds-1")),
                "{not json",
                json.dumps({"title": "missing fields"}),
            ]
        ),
        encoding="utf-8",
    )
    problems = load_problems(f)
    assert [p.id for p in problems] == ["birds-1"]


def test_load_directory(tmp_path):
    (tmp_path / "a.json").write_text(json.dumps([RECORD, RECORD]), encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    problems = load_problems(tmp_path)
    assert len(problems) == 2
    assert problems[0].id != problems[1].id


def test_seed_falls_back_when_path_empty(tmp_path):
    problems = seed_problems(str(tmp_path / "nothing.json"))
    assert len(problems) == 4


def test_get_unknown_raises():
    catalog = ProblemCatalog(seed_problems())
    with pytest.raises(ProblemNotFound):
        catalog.get("nope")
    with pytest.raises(ProblemNotFound):
        catalog.get(None)


def test_create_strict_rejects_inconsistent():
    catalog = ProblemCatalog(strict_arithmetic=True)
    with pytest.raises(InconsistentProblem):
        catalog.create(ProblemIn.model_validate(dict(RECORD, correctAnswer=6)))
    assert len(catalog) == 0

    created = catalog.create(ProblemIn.model_validate(RECORD))
    assert catalog.get(created.id) is created
