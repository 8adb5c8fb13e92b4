import pytest
from fastapi import HTTPException

from resource_hub.features.feedback.services.feedback import average_rating, validate_rating
from tests.helpers import register_and_verify


def _resource(client, headers):
    response = client.post(
        "/api/v1/resources/upload",
        data={"title": "Compiler Design", "subject": "CD", "department": "CSE", "category": "notes"},
        files={"file": ("cd.pdf", b"cd notes", "application/pdf")},
        headers=headers,
    )
    return response.json()["data"]


def test_average_rating():
    assert average_rating([]) == 0.0
    assert average_rating([5, 4]) == 4.5
    assert average_rating([5, 4, 4]) == 4.3


@pytest.mark.parametrize("rating", [0, 6, -1])
def test_validate_rating_rejects_out_of_range(rating):
    with pytest.raises(HTTPException) as exc_info:
        validate_rating(rating)

    assert exc_info.value.status_code == 400


def test_feedback_summary(client, notifier, student):
    resource = _resource(client, student["headers"])
    other = register_and_verify(client, notifier, name="Second Reviewer")

    response = client.post(
        "/api/v1/feedback",
        json={"resource_id": resource["id"], "rating": 5, "comment": "Great"},
        headers=student["headers"],
    )
    assert response.status_code == 201
    assert response.json()["data"]["user_name"] == "Test User"
    assert response.json()["data"]["resource_title"] == "Compiler Design"

    client.post("/api/v1/feedback", json={"resource_id": resource["id"], "rating": 4}, headers=other["headers"])

    response = client.get(f"/api/v1/feedback/resource/{resource['id']}")
    assert response.status_code == 200
    summary = response.json()["data"]
    assert summary["total_feedback"] == 2
    assert summary["average_rating"] == 4.5


def test_feedback_rejects_bad_rating(client, student):
    resource = _resource(client, student["headers"])

    response = client.post(
        "/api/v1/feedback", json={"resource_id": resource["id"], "rating": 9}, headers=student["headers"]
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Rating must be between 1 and 5"


def test_update_and_delete_own_feedback(client, notifier, student):
    resource = _resource(client, student["headers"])
    created = client.post(
        "/api/v1/feedback", json={"resource_id": resource["id"], "rating": 2}, headers=student["headers"]
    ).json()["data"]

    response = client.put(
        f"/api/v1/feedback/{created['id']}", json={"rating": 3, "comment": "Better now"}, headers=student["headers"]
    )
    assert response.status_code == 200
    assert response.json()["data"]["rating"] == 3

    response = client.get("/api/v1/feedback/user/my-feedback", headers=student["headers"])
    assert [f["id"] for f in response.json()["data"]] == [created["id"]]

    stranger = register_and_verify(client, notifier, name="Stranger")
    response = client.delete(f"/api/v1/feedback/{created['id']}", headers=stranger["headers"])
    assert response.status_code == 404
    assert response.json()["message"] == "Feedback not found or not authorized"

    response = client.delete(f"/api/v1/feedback/{created['id']}", headers=student["headers"])
    assert response.status_code == 200
