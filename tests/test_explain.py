from fastapi.testclient import TestClient

from main import create_app

client = TestClient(create_app())


def test_explain_addition():
    r = client.get("/api/explain/68dd3fb4e6adc62510431120")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["steps"][-1] == "5 + 3 = 8 apples total"
    assert data["visualization"] == {
        "type": "apples",
        "operation": "add",
        "initialCount": 5,
        "changeCount": 3,
        "finalCount": 8,
    }
    assert data["hints"][0] == "Start by counting the initial apples"
    assert data["relatedConcepts"] == ["Addition", "Subtraction", "Counting"]


def test_explain_subtraction_medium():
    data = client.get("/api/explain/68dd3fb4e6adc62510431123").json()["data"]
    assert data["visualization"]["operation"] == "subtract"
    assert data["visualization"]["changeCount"] == 10
    assert data["hints"] == [
        "Begin with the total gifts",
        "Remove the gifts that are taken away",
        "Count what remains",
    ]
    assert "Multi-step Problems" in data["relatedConcepts"]
    assert "Mental Math" in data["relatedConcepts"]


def test_explain_404():
    r = client.get("/api/explain/missing")
    assert r.status_code == 404
    assert r.json()["error"] == "Problem not found"
