"""Idea counts per status are an admin-only aggregate over all users."""


def test_ideas_by_status_counts_all_users(client, make_user):
    _, admin = make_user("admin@example.com", roles=["admin", "user"])
    _, member = make_user("member@example.com")

    for title, status, headers in [
        ("A", "Draft", admin),
        ("B", "Draft", member),
        ("C", "Archived", member),
        ("D", "Prioritized", admin),
    ]:
        client.post("/api/ideas", json={"title": title, "status": status}, headers=headers)

    response = client.get("/api/analytics/ideas-by-status", headers=admin)
    assert response.status_code == 200
    counts = {row["status"]: row["count"] for row in response.json()}
    assert counts == {"Draft": 2, "Archived": 1, "Prioritized": 1}


def test_ideas_by_status_empty(client, make_user):
    _, admin = make_user("admin@example.com", roles=["admin"])
    response = client.get("/api/analytics/ideas-by-status", headers=admin)
    assert response.json() == []


def test_ideas_by_status_requires_admin(client, alice):
    _, headers = alice
    response = client.get("/api/analytics/ideas-by-status", headers=headers)
    assert response.status_code == 403

    client.cookies.clear()
    assert client.get("/api/analytics/ideas-by-status").status_code == 401
