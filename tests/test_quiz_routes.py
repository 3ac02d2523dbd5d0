from quiz_builder.core.dependencies import get_quiz_service
from quiz_builder.core.exceptions import StorageError


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_create_geo_quiz(client, geo_quiz_payload):
    resp = client.post("/quizzes", json=geo_quiz_payload)

    assert resp.status_code == 201
    data = resp.json()
    assert data["title"] == "Geo Quiz"
    assert data["createdAt"].endswith("Z")
    assert len(data["questions"]) == 1
    question = data["questions"][0]
    assert question["type"] == "BOOLEAN"
    assert question["order"] == 0
    assert question["booleanAnswer"] is True
    assert question["inputAnswer"] is None
    assert question["options"] == []


def test_create_checkbox_without_correct_option(client):
    resp = client.post(
        "/quizzes",
        json={
            "title": "Letters",
            "questions": [
                {
                    "text": "Pick",
                    "type": "CHECKBOX",
                    "options": [{"text": "A", "isCorrect": False}, {"text": "B", "isCorrect": False}],
                }
            ],
        },
    )

    assert resp.status_code == 400
    data = resp.json()
    assert data["code"] == "validation_error"
    assert data["type"] == "QuizValidationError"
    assert data["details"] == [
        {"field": "questions.0.options", "message": "Checkbox questions must include at least one correct option"}
    ]


def test_malformed_json_is_a_validation_error(client):
    resp = client.post("/quizzes", content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "validation_error"


def test_get_and_list(client, mixed_quiz_payload, geo_quiz_payload):
    assert client.get("/quizzes").json() == []

    created = client.post("/quizzes", json=mixed_quiz_payload).json()
    client.post("/quizzes", json=geo_quiz_payload)

    detail = client.get(f"/quizzes/{created['id']}")
    assert detail.status_code == 200
    assert detail.json() == created

    listing = client.get("/quizzes")
    assert listing.status_code == 200
    summaries = listing.json()
    assert [(s["title"], s["questionCount"]) for s in summaries] == [("Geo Quiz", 1), ("General Knowledge", 3)]
    assert set(summaries[0]) == {"id", "title", "questionCount", "createdAt"}
    assert client.get("/quizzes").json() == summaries


def test_delete_then_get_is_not_found(client, geo_quiz_payload):
    quiz_id = client.post("/quizzes", json=geo_quiz_payload).json()["id"]

    resp = client.delete(f"/quizzes/{quiz_id}")
    assert resp.status_code == 204
    assert resp.content == b""

    missing = client.get(f"/quizzes/{quiz_id}")
    assert missing.status_code == 404
    assert missing.json()["error"] == "Quiz not found"
    assert missing.json()["code"] == "quiz_not_found"


def test_delete_unknown_quiz_is_not_found(client):
    resp = client.delete("/quizzes/987")
    assert resp.status_code == 404
    assert resp.json()["code"] == "quiz_not_found"


def test_non_integer_id_is_a_client_error(client):
    for resp in (client.get("/quizzes/abc"), client.delete("/quizzes/abc")):
        assert resp.status_code == 400
        assert resp.json()["error"] == "Invalid quiz identifier"
        assert resp.json()["code"] == "invalid_identifier"


def test_non_ascii_digit_id_is_a_client_error(client, geo_quiz_payload):
    assert client.post("/quizzes", json=geo_quiz_payload).json()["id"] == 1

    for resp in (client.get("/quizzes/١"), client.delete("/quizzes/١")):
        assert resp.status_code == 400
        assert resp.json()["code"] == "invalid_identifier"

    assert client.get("/quizzes/1").status_code == 200


def test_storage_failure_is_generic(client):
    from main import app

    class FailingService:
        def list(self):
            raise StorageError() from RuntimeError("connection refused on db-host:5432")

    app.dependency_overrides[get_quiz_service] = lambda: FailingService()

    resp = client.get("/quizzes")

    assert resp.status_code == 500
    body = resp.json()
    assert body["code"] == "storage_error"
    assert "db-host" not in resp.text


def test_storage_failure_is_logged_once(client, caplog):
    from unittest.mock import MagicMock

    from sqlalchemy.exc import OperationalError

    from main import app
    from quiz_builder.models.quiz_db.quiz_crud import storage_errors

    class BrokenDatabaseService:
        def list(self):
            with storage_errors(MagicMock(), "list quizzes"):
                raise OperationalError("SELECT 1", {}, Exception("server closed the connection"))

    app.dependency_overrides[get_quiz_service] = lambda: BrokenDatabaseService()

    with caplog.at_level("ERROR"):
        resp = client.get("/quizzes")

    assert resp.status_code == 500
    errors = [record for record in caplog.records if record.levelname == "ERROR"]
    assert len(errors) == 1
    assert "list quizzes" in errors[0].getMessage()
