from fastapi.testclient import TestClient

from main import create_app

app = create_app()
client = TestClient(app)

APPLE = "68dd3fb4e6adc62510431120"


def test_health():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert r.json()["data"]["problems"] == 4


def test_health_db():
    r = client.get("/health/db")
    assert r.status_code == 200 and r.json()["success"] is True


def test_submissions_logged_newest_first():
    for answer in ("3", "8"):
        client.post(
            "/api/submit",
            json={"problemId": APPLE, "userAnswer": answer, "userId": "audit", "timeTaken": 4.5},
        )

    r = client.get("/api/submissions", params={"userId": "audit"})
    assert r.status_code == 200
    items = r.json()["data"]
    assert [s["userAnswer"] for s in items] == [8, 3]
    assert [s["isCorrect"] for s in items] == [True, False]
    assert items[0]["timeTaken"] == 4.5
    assert items[0]["problemId"] == APPLE

    r2 = client.get(f"/api/submissions/{items[0]['id']}")
    assert r2.status_code == 200
    assert r2.json()["data"]["id"] == items[0]["id"]


def test_submissions_limit():
    for _ in range(3):
        client.post("/api/submit", json={"problemId": APPLE, "userAnswer": 1, "userId": "lim"})
    r = client.get("/api/submissions", params={"userId": "lim", "limit": 2})
    assert len(r.json()["data"]) == 2


def test_submission_404():
    r = client.get("/api/submissions/missing")
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Submission not found"}
