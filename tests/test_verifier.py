import pytest

from catalog import seed_problems
from errors import InvalidAnswerFormat
from verifier import parse_answer, verify

PROBLEMS = seed_problems()


@pytest.mark.parametrize("problem", PROBLEMS, ids=lambda p: p.title)
def test_verify_correct_answer(problem):
    fb = verify(problem, problem.correct_answer)
    assert fb.is_correct is True
    assert fb.difference == 0
    assert str(problem.correct_answer) in fb.explanation.reasoning


@pytest.mark.parametrize("offset", [-7, -1, 1, 4])
def test_verify_incorrect_direction(offset):
    problem = PROBLEMS[0]
    answer = problem.correct_answer + offset
    fb = verify(problem, answer)
    assert fb.is_correct is False
    assert fb.difference == abs(offset)
    expected = "too high" if offset > 0 else "too low"
    assert f"{abs(offset)} {expected}" in fb.explanation.reasoning


def test_verify_parses_raw_strings():
    fb = verify(PROBLEMS[0], " 8 ")
    assert fb.is_correct and fb.user_answer == 8


@pytest.mark.parametrize(
    "raw, expected",
    [("8", 8), ("-3", -3), ("+12", 12), ("  007 ", 7), (5, 5), (5.0, 5)],
)
def test_parse_answer_ok(raw, expected):
    assert parse_answer(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", "abc", "8.5", "8abc", "1e3", "½", "٣", 8.5, True, [8], "9" * 4001],
)
def test_parse_answer_rejects(raw):
    with pytest.raises(InvalidAnswerFormat):
        parse_answer(raw)


def test_invalid_format_is_value_error():
    with pytest.raises(ValueError):
        parse_answer("abc")


@pytest.mark.parametrize("answer", [10**13, -(10**13), 2**63, 10**40, "9" * 40])
def test_verify_is_total_over_large_integers(answer):
    problem = PROBLEMS[0]
    fb = verify(problem, answer)
    value = int(answer)
    assert fb.is_correct is False
    assert fb.user_answer == value
    assert fb.difference == abs(value - problem.correct_answer)
    expected = "too high" if value > problem.correct_answer else "too low"
    assert expected in fb.explanation.reasoning


def test_parse_answer_long_digit_string():
    assert parse_answer("1" + "0" * 3000) == 10**3000
