"""Idea CRUD, partial updates, ownership and conversion into projects."""
import uuid


def create_idea(client, headers, **fields):
    response = client.post("/api/ideas", json=fields, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_idea_applies_defaults(client, alice):
    user, headers = alice
    idea = create_idea(client, headers, title="Better onboarding")

    assert idea["status"] == "Draft"
    assert idea["tags"] == []
    assert idea["priority"] is None
    assert idea["description"] is None
    assert idea["userId"] == user["id"]


def test_create_idea_keeps_supplied_fields(client, alice):
    _, headers = alice
    idea = create_idea(
        client, headers,
        title="CRM", description="Track customers", status="Prioritized",
        tags=["Sales", "CRM"], priority="High",
    )
    assert idea["status"] == "Prioritized"
    assert idea["tags"] == ["Sales", "CRM"]
    assert idea["priority"] == "High"


def test_create_idea_requires_title(client, alice):
    _, headers = alice
    assert client.post("/api/ideas", json={"description": "no title"}, headers=headers).status_code == 400

    response = client.post("/api/ideas", json={"title": "   "}, headers=headers)
    assert response.status_code == 400
    assert response.json() == {"message": "Title is required"}


def test_create_idea_rejects_unknown_status(client, alice):
    _, headers = alice
    response = client.post("/api/ideas", json={"title": "X", "status": "Someday"}, headers=headers)
    assert response.status_code == 400


def test_duplicate_title_conflicts_across_users(client, alice, bob):
    create_idea(client, alice[1], title="Shared title")

    response = client.post("/api/ideas", json={"title": "Shared title"}, headers=bob[1])
    assert response.status_code == 409
    assert "already exists" in response.json()["message"]


def test_ideas_require_authentication(client):
    assert client.get("/api/ideas").status_code == 401
    assert client.post("/api/ideas", json={"title": "X"}).status_code == 401


def test_list_ideas_is_owner_scoped_and_newest_first(client, alice, bob):
    first = create_idea(client, alice[1], title="First")
    second = create_idea(client, alice[1], title="Second")
    create_idea(client, bob[1], title="Bob's idea")

    response = client.get("/api/ideas", headers=alice[1])
    assert response.status_code == 200
    ids = [idea["id"] for idea in response.json()]
    assert set(ids) == {first["id"], second["id"]}
    created = [idea["createdAt"] for idea in response.json()]
    assert created == sorted(created, reverse=True)


def test_get_idea_of_another_user_is_not_found(client, alice, bob):
    idea = create_idea(client, alice[1], title="Private")

    assert client.get(f"/api/ideas/{idea['id']}", headers=alice[1]).status_code == 200

    response = client.get(f"/api/ideas/{idea['id']}", headers=bob[1])
    assert response.status_code == 404
    assert response.json() == {"message": "Idea not found"}

    assert client.put(f"/api/ideas/{idea['id']}", json={"title": "Hijack"}, headers=bob[1]).status_code == 404
    assert client.delete(f"/api/ideas/{idea['id']}", headers=bob[1]).status_code == 404


def test_update_is_partial(client, alice):
    _, headers = alice
    idea = create_idea(client, headers, title="Partial", description="Keep me", tags=["a"])

    response = client.put(f"/api/ideas/{idea['id']}", json={"status": "Prioritized"}, headers=headers)
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "Prioritized"
    assert body["description"] == "Keep me"
    assert body["tags"] == ["a"]
    assert body["title"] == "Partial"


def test_update_null_tags_become_empty_and_null_description_is_kept(client, alice):
    _, headers = alice
    idea = create_idea(client, headers, title="Nulls", description="Something", tags=["x", "y"])

    response = client.patch(
        f"/api/ideas/{idea['id']}",
        json={"tags": None, "description": None},
        headers=headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["tags"] == []
    assert body["description"] is None

    fetched = client.get(f"/api/ideas/{idea['id']}", headers=headers).json()
    assert fetched["tags"] == []
    assert fetched["description"] is None


def test_update_trims_description(client, alice):
    _, headers = alice
    idea = create_idea(client, headers, title="Trim")
    response = client.put(f"/api/ideas/{idea['id']}", json={"description": "  padded  "}, headers=headers)
    assert response.json()["description"] == "padded"


def test_update_without_fields_is_rejected(client, alice):
    _, headers = alice
    idea = create_idea(client, headers, title="Empty body")
    response = client.put(f"/api/ideas/{idea['id']}", json={}, headers=headers)
    assert response.status_code == 400
    assert response.json() == {"message": "No fields provided for update"}


def test_update_title_collision_conflicts(client, alice):
    _, headers = alice
    create_idea(client, headers, title="Taken")
    idea = create_idea(client, headers, title="Free")

    response = client.put(f"/api/ideas/{idea['id']}", json={"title": "Taken"}, headers=headers)
    assert response.status_code == 409

    # The failed write left the idea untouched
    assert client.get(f"/api/ideas/{idea['id']}", headers=headers).json()["title"] == "Free"


def test_update_missing_idea_is_not_found(client, alice):
    _, headers = alice
    response = client.put(f"/api/ideas/{uuid.uuid4()}", json={"title": "Ghost"}, headers=headers)
    assert response.status_code == 404


def test_delete_idea(client, alice):
    _, headers = alice
    idea = create_idea(client, headers, title="Short lived")

    response = client.delete(f"/api/ideas/{idea['id']}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Idea deleted successfully"}
    assert client.get(f"/api/ideas/{idea['id']}", headers=headers).status_code == 404


def test_delete_nonexistent_idea_is_not_found(client, alice):
    _, headers = alice
    for _ in range(3):
        response = client.delete(f"/api/ideas/{uuid.uuid4()}", headers=headers)
        assert response.status_code == 404


def test_convert_idea_to_project(client, alice):
    user, headers = alice
    idea = create_idea(client, headers, title="Mobile app", description="On the go")

    response = client.post(f"/api/ideas/{idea['id']}/convert", headers=headers)
    assert response.status_code == 201
    project = response.json()
    assert project["name"] == "Mobile app"
    assert project["description"] == "On the go"
    assert project["ideaId"] == idea["id"]
    assert project["ownerId"] == user["id"]
    assert project["status"] == "Planning"

    idea = client.get(f"/api/ideas/{idea['id']}", headers=headers).json()
    assert idea["status"] == "ConvertedToProject"


def test_convert_with_taken_name_conflicts_and_keeps_idea_status(client, alice):
    _, headers = alice
    client.post("/api/projects", json={"name": "Existing"}, headers=headers)
    idea = create_idea(client, headers, title="Idea for existing")

    response = client.post(
        f"/api/ideas/{idea['id']}/convert", json={"name": "Existing"}, headers=headers
    )
    assert response.status_code == 409
    idea = client.get(f"/api/ideas/{idea['id']}", headers=headers).json()
    assert idea["status"] == "Draft"


def test_deleting_converted_idea_keeps_project(client, alice):
    _, headers = alice
    idea = create_idea(client, headers, title="Origin")
    project = client.post(f"/api/ideas/{idea['id']}/convert", headers=headers).json()

    assert client.delete(f"/api/ideas/{idea['id']}", headers=headers).status_code == 200

    project = client.get(f"/api/projects/{project['id']}", headers=headers).json()
    assert project["ideaId"] is None
