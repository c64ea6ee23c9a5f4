import pytest
from unittest.mock import MagicMock

from serverless_api.api.deps.dependencies import get_course_service


@pytest.fixture
def new_course():
    return {
        "title": "Python for Data Work",
        "description": "Hands-on introduction to pandas and friends",
        "instructor": "Ada Lovelace",
        "duration": 24,
        "level": "intermediate",
    }


def test_list_courses_defaults(client):
    response = client.get("/api/courses")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [course["id"] for course in body["data"]] == [1, 2, 3]
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 3, "totalPages": 1}
    assert body["timestamp"].endswith("Z")


def test_list_courses_second_page(client):
    response = client.get("/api/courses", params={"page": 2, "limit": 2})

    assert response.status_code == 200
    body = response.json()
    assert len(body["data"]) == 1
    assert body["pagination"]["totalPages"] == 2


def test_list_courses_filter_by_level(client):
    response = client.get("/api/courses", params={"level": "advanced"})

    body = response.json()
    assert [course["title"] for course in body["data"]] == ["Advanced Node.js"]
    assert body["pagination"]["total"] == 1


def test_list_courses_invalid_level(client):
    response = client.get("/api/courses", params={"level": "expert"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Level must be beginner, intermediate, or advanced"


def test_list_courses_limit_out_of_bounds(client):
    response = client.get("/api/courses", params={"limit": 101})

    assert response.status_code == 400
    assert response.json()["error"] == "Limit must be between 1 and 100"


def test_list_courses_page_zero(client):
    response = client.get("/api/courses", params={"page": 0})

    assert response.status_code == 400
    assert response.json()["error"] == "Page must be a positive integer"


def test_get_course(client):
    response = client.get("/api/courses/2")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["title"] == "Advanced Node.js"
    assert body["data"]["level"] == "advanced"
    assert "message" not in body


def test_get_course_not_found(client):
    response = client.get("/api/courses/999")

    assert response.status_code == 404
    body = response.json()
    assert body == {"success": False, "error": "Course not found", "timestamp": body["timestamp"]}


@pytest.mark.parametrize("raw_id", ["abc", "-1", "1.5"])
def test_get_course_invalid_id(client, raw_id):
    response = client.get(f"/api/courses/{raw_id}")

    assert response.status_code == 400
    assert response.json()["error"] == "ID must be a valid number"


def test_create_course(client, new_course):
    response = client.post("/api/courses", json={**new_course, "title": "  Python for Data Work  "})

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Course created successfully"
    assert body["data"]["id"] == 4
    assert body["data"]["title"] == "Python for Data Work"
    assert body["data"]["created"] == body["data"]["updated"]

    fetched = client.get("/api/courses/4").json()
    assert fetched["data"]["instructor"] == "Ada Lovelace"


def test_create_course_reports_every_field(client):
    response = client.post(
        "/api/courses",
        json={"title": "AB", "description": "short", "instructor": "X", "duration": 0, "level": "expert"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"].startswith("Title must be at least 3 characters")
    assert [detail["field"] for detail in body["details"]] == [
        "title",
        "description",
        "instructor",
        "duration",
        "level",
    ]


def test_create_course_without_body(client):
    response = client.post("/api/courses")

    assert response.status_code == 400
    assert response.json()["error"] == "Request body must be a JSON object"


def test_create_course_rejects_array_body(client, new_course):
    response = client.post("/api/courses", json=[new_course])

    assert response.status_code == 400


def test_update_course_preserves_other_fields(client):
    before = client.get("/api/courses/1").json()["data"]

    response = client.put("/api/courses/1", json={"title": "TypeScript Deep Dive"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Course updated successfully"
    after = body["data"]
    assert after["title"] == "TypeScript Deep Dive"
    assert after["description"] == before["description"]
    assert after["duration"] == before["duration"]
    assert after["created"] == before["created"]
    assert after["updated"] != before["updated"]


def test_update_course_invalid_field(client):
    response = client.put("/api/courses/1", json={"duration": 500})

    assert response.status_code == 400
    assert response.json()["details"] == [
        {"field": "duration", "message": "Duration must not exceed 200 hours"}
    ]


def test_update_course_not_found(client):
    response = client.put("/api/courses/999", json={"title": "Nothing Here"})

    assert response.status_code == 404
    assert response.json()["error"] == "Course not found"


def test_update_course_invalid_id_checked_first(client):
    response = client.put("/api/courses/abc", json={"title": "X"})

    assert response.status_code == 400
    assert response.json()["error"] == "ID must be a valid number"


def test_unexpected_error_detail_in_development(client):
    broken_service = MagicMock()
    broken_service.list_courses.side_effect = RuntimeError("store exploded")
    client.app.dependency_overrides[get_course_service] = lambda: broken_service

    response = client.get("/api/courses")

    assert response.status_code == 500
    assert response.json()["error"] == "store exploded"


def test_unexpected_error_hidden_in_production(prod_client):
    broken_service = MagicMock()
    broken_service.get_course.side_effect = RuntimeError("store exploded")
    prod_client.app.dependency_overrides[get_course_service] = lambda: broken_service

    response = prod_client.get("/api/courses/1")

    assert response.status_code == 500
    assert response.json()["error"] == "Internal server error"
