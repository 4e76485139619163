"""Project CRUD, pagination and ownership."""
import uuid
from datetime import datetime, timedelta

from sqlmodel import select

from sparkboard.models import Project


def create_project(client, headers, **fields):
    response = client.post("/api/projects", json=fields, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_project_applies_defaults(client, alice):
    user, headers = alice
    project = create_project(client, headers, name="Relaunch")

    assert project["status"] == "Planning"
    assert project["assignedToUserIds"] == []
    assert project["ownerId"] == user["id"]
    assert project["budget"] is None
    assert project["ideaId"] is None


def test_create_project_with_all_fields(client, alice, bob):
    _, headers = alice
    project = create_project(
        client, headers,
        name="E-commerce", description="Shop", status="InProgress",
        assignedToUserIds=[bob[0]["id"]],
        startDate="2025-07-01T00:00:00", endDate="2025-12-31T00:00:00",
        budget=150000.0,
    )
    assert project["status"] == "InProgress"
    assert project["assignedToUserIds"] == [bob[0]["id"]]
    assert project["budget"] == 150000.0
    assert project["startDate"].startswith("2025-07-01")


def test_create_project_validation(client, alice):
    _, headers = alice
    assert client.post("/api/projects", json={}, headers=headers).status_code == 400
    assert client.post("/api/projects", json={"name": "Neg", "budget": -1}, headers=headers).status_code == 400

    response = client.post(
        "/api/projects",
        json={"name": "Backwards", "startDate": "2025-12-01T00:00:00", "endDate": "2025-01-01T00:00:00"},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json() == {"message": "End date cannot be before start date"}


def test_duplicate_project_name_conflicts(client, alice, bob):
    create_project(client, alice[1], name="Unique")
    response = client.post("/api/projects", json={"name": "Unique"}, headers=bob[1])
    assert response.status_code == 409


def test_create_project_with_unknown_idea_is_not_found(client, alice, bob):
    response = client.post(
        "/api/projects", json={"name": "Orphan", "ideaId": str(uuid.uuid4())}, headers=alice[1]
    )
    assert response.status_code == 404

    bobs_idea = client.post("/api/ideas", json={"title": "Bob's"}, headers=bob[1]).json()
    response = client.post(
        "/api/projects", json={"name": "Borrowed", "ideaId": bobs_idea["id"]}, headers=alice[1]
    )
    assert response.status_code == 404


def test_create_project_from_idea_leaves_idea_status(client, alice):
    _, headers = alice
    idea = client.post("/api/ideas", json={"title": "Seed"}, headers=headers).json()
    project = create_project(client, headers, name="Grown", ideaId=idea["id"])

    assert project["ideaId"] == idea["id"]
    assert client.get(f"/api/ideas/{idea['id']}", headers=headers).json()["status"] == "Draft"


def test_pagination(client, db, alice):
    user, headers = alice
    for i in range(15):
        create_project(client, headers, name=f"Project {i:02d}")

    # Give every project a distinct creation time: Project 00 is the oldest
    base = datetime(2025, 1, 1)
    for project in db.exec(select(Project).where(Project.owner_id == user["id"])).all():
        project.created_at = base + timedelta(hours=int(project.name.split()[-1]))
        db.add(project)
    db.commit()

    response = client.get("/api/projects?page=2&pageSize=10", headers=headers)
    assert response.status_code == 200
    names = [p["name"] for p in response.json()]
    assert names == [f"Project {i:02d}" for i in range(4, -1, -1)]
    assert response.headers["X-Has-More"] == "false"
    assert response.headers["X-Total-Count"] == "15"

    response = client.get("/api/projects?page=1&pageSize=10", headers=headers)
    names = [p["name"] for p in response.json()]
    assert names == [f"Project {i:02d}" for i in range(14, 4, -1)]
    assert response.headers["X-Has-More"] == "true"


def test_pagination_falls_back_to_defaults(client, alice):
    _, headers = alice
    for i in range(12):
        create_project(client, headers, name=f"P{i}")

    for query in ("page=abc&pageSize=xyz", "page=0&pageSize=-3", ""):
        response = client.get(f"/api/projects?{query}", headers=headers)
        assert response.status_code == 200
        assert len(response.json()) == 10
        assert response.headers["X-Page"] == "1"
        assert response.headers["X-Page-Size"] == "10"


def test_pagination_clamps_oversized_values(client, alice):
    _, headers = alice
    for i in range(3):
        create_project(client, headers, name=f"P{i}")

    response = client.get("/api/projects?page=99999999999999999999&pageSize=10", headers=headers)
    assert response.status_code == 200
    assert response.json() == []
    assert response.headers["X-Page"] == "1000000"
    assert response.headers["X-Has-More"] == "false"
    assert response.headers["X-Total-Count"] == "3"

    response = client.get("/api/projects?pageSize=100000", headers=headers)
    assert response.status_code == 200
    assert len(response.json()) == 3
    assert response.headers["X-Page-Size"] == "100"


def test_projects_are_owner_scoped(client, alice, bob):
    project = create_project(client, alice[1], name="Alice only")

    assert client.get("/api/projects", headers=bob[1]).json() == []
    assert client.get(f"/api/projects/{project['id']}", headers=bob[1]).status_code == 404
    assert client.patch(f"/api/projects/{project['id']}", json={"name": "Mine"}, headers=bob[1]).status_code == 404
    assert client.delete(f"/api/projects/{project['id']}", headers=bob[1]).status_code == 404
    assert client.get(f"/api/projects/{project['id']}", headers=alice[1]).status_code == 200


def test_update_project_is_partial(client, alice):
    _, headers = alice
    project = create_project(client, headers, name="Partial", description="Keep", budget=10)

    response = client.put(
        f"/api/projects/{project['id']}", json={"status": "OnHold", "assignedToUserIds": None}, headers=headers
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OnHold"
    assert body["description"] == "Keep"
    assert body["budget"] == 10
    assert body["assignedToUserIds"] == []


def test_update_project_timeline_checked_against_stored_dates(client, alice):
    _, headers = alice
    project = create_project(client, headers, name="Timeline", startDate="2025-06-01T00:00:00")

    response = client.patch(
        f"/api/projects/{project['id']}", json={"endDate": "2025-01-01T00:00:00"}, headers=headers
    )
    assert response.status_code == 400


def test_update_project_name_conflict(client, alice):
    _, headers = alice
    create_project(client, headers, name="Taken")
    project = create_project(client, headers, name="Free")

    response = client.put(f"/api/projects/{project['id']}", json={"name": "Taken"}, headers=headers)
    assert response.status_code == 409


def test_delete_project_removes_its_tasks(client, alice):
    _, headers = alice
    project = create_project(client, headers, name="Doomed")
    task = client.post(f"/api/projects/{project['id']}/tasks", json={"title": "T"}, headers=headers).json()

    response = client.delete(f"/api/projects/{project['id']}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Project deleted successfully"}

    assert client.get(f"/api/projects/{project['id']}", headers=headers).status_code == 404
    assert client.get(f"/api/projects/{project['id']}/tasks/{task['id']}", headers=headers).status_code == 404


def test_delete_missing_project_is_not_found(client, alice):
    response = client.delete(f"/api/projects/{uuid.uuid4()}", headers=alice[1])
    assert response.status_code == 404
