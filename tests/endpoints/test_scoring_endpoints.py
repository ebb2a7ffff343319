"""
Endpoint tests for the scoring and quiz authoring routers.

Run: pytest tests/endpoints -v
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestScoreEndpoint:

    def test_form_data_submission(self, client, check_in_quiz_payload):
        response = client.post("/api/scoring/score", json={
            "quiz": check_in_quiz_payload,
            "form_data": {"question_1": "Yes", "question_2": "7", "csrf": "abc"},
        })

        assert response.status_code == 200
        body = response.json()
        assert body["total_score"] == 12
        assert body["answers"] == [
            {"question_id": "1", "answer": "Yes"},
            {"question_id": "2", "answer": 7},
        ]
        assert body["sub_scores"] is None
        assert body["max_score"] == 15

    def test_typed_answers(self, client, check_in_quiz_payload):
        response = client.post("/api/scoring/score", json={
            "quiz": check_in_quiz_payload,
            "answers": {"1": "No", "2": 3},
        })

        assert response.status_code == 200
        assert response.json()["total_score"] == 3

    def test_bad_scale_value_still_scores(self, client, check_in_quiz_payload):
        response = client.post("/api/scoring/score", json={
            "quiz": check_in_quiz_payload,
            "form_data": {"question_1": "Yes", "question_2": "lots"},
        })

        assert response.status_code == 200
        assert response.json()["total_score"] == 5

    def test_interpretation_uses_first_matching_range(self, client, check_in_quiz_payload):
        check_in_quiz_payload["score_ranges"] = [
            {"min": 0, "max": 5, "status": "Low", "description": "Low desc", "color": "green"},
            {"min": 3, "max": 10, "status": "High", "description": "High desc", "color": "orange"},
        ]
        response = client.post("/api/scoring/score", json={
            "quiz": check_in_quiz_payload,
            "answers": {"2": "4"},
        })

        interpretation = response.json()["interpretation"]
        assert interpretation["label"] == "Low"
        assert interpretation["matched_range"]["max"] == 5
        assert interpretation["percentage"] is None

    def test_fallback_interpretation(self, client, check_in_quiz_payload):
        response = client.post("/api/scoring/score", json={
            "quiz": check_in_quiz_payload,
            "answers": {"1": "Yes", "2": "10"},
        })

        interpretation = response.json()["interpretation"]
        assert interpretation["percentage"] == 75
        assert interpretation["label"] == "Doing Well"
        assert interpretation["color"] == "green"

    def test_sub_scores_and_multiplier(self, client, check_in_quiz_payload):
        check_in_quiz_payload["questions"][0]["category"] = "Sleep"
        check_in_quiz_payload["questions"][1]["category"] = "Mood"
        check_in_quiz_payload["score_multiplier"] = 2

        response = client.post("/api/scoring/score", json={
            "quiz": check_in_quiz_payload,
            "answers": {"1": "Yes", "2": "4"},
        })

        body = response.json()
        assert body["total_score"] == 18
        assert body["sub_scores"] == {"Sleep": 10, "Mood": 8}
        assert body["max_score"] == 30

    def test_answers_and_form_data_are_exclusive(self, client, check_in_quiz_payload):
        response = client.post("/api/scoring/score", json={
            "quiz": check_in_quiz_payload,
            "answers": {"1": "Yes"},
            "form_data": {"question_1": "Yes"},
        })
        assert response.status_code == 422

    def test_unknown_question_type_is_rejected(self, client, check_in_quiz_payload):
        check_in_quiz_payload["questions"][0]["type"] = "slider"
        response = client.post("/api/scoring/score", json={
            "quiz": check_in_quiz_payload,
            "answers": {},
        })
        assert response.status_code == 422


class TestInterpretAndMaxScore:

    def test_interpret_lower_is_better(self, client, check_in_quiz_payload):
        check_in_quiz_payload["scoring_direction"] = "lower-is-better"
        response = client.post("/api/scoring/interpret", json={
            "score": 4,
            "quiz": check_in_quiz_payload,
        })

        assert response.status_code == 200
        assert response.json()["label"] == "Doing Well"
        assert response.json()["percentage"] == 20

    def test_max_score(self, client, check_in_quiz_payload):
        response = client.post("/api/scoring/max-score", json={"quiz": check_in_quiz_payload})
        assert response.json() == {"max_score": 15}


class TestQuizAuthoring:

    def test_validate_valid_quiz(self, client, check_in_quiz_payload):
        response = client.post("/api/quizzes/validate", json=check_in_quiz_payload)

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": {}, "warnings": {}}

    def test_validate_reports_errors_and_warnings(self, client, check_in_quiz_payload):
        check_in_quiz_payload["title"] = ""
        check_in_quiz_payload["questions"][0]["options"] = ["Yes"]
        check_in_quiz_payload["score_ranges"] = [
            {"min": 0, "max": 10, "status": "R1"},
            {"min": 5, "max": 15, "status": "R2"},
        ]

        body = client.post("/api/quizzes/validate", json=check_in_quiz_payload).json()

        assert body["is_valid"] is False
        assert set(body["errors"]) == {"title", "question_0"}
        assert "range_0_overlap" in body["warnings"]

    def test_analysis(self, client, check_in_quiz_payload):
        response = client.post("/api/quizzes/analysis", json=check_in_quiz_payload)

        assert response.status_code == 200
        body = response.json()
        assert body["total_questions"] == 2
        assert body["max_score"] == 15
        assert body["distributions"]["by_type"]["scale"] == 1


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
