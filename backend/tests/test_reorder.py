from portfolio.models import ProjectItem


def _projects(make_section, create, count=4):
    section_id = make_section("projects")
    ids = [
        create("projects", {"sectionId": section_id, "title": f"P{i}"})["id"]
        for i in range(count)
    ]
    return section_id, ids


def _stored_sequence(section_id):
    rows = ProjectItem.query.filter_by(section_id=section_id).order_by(ProjectItem.order).all()
    return [row.id for row in rows]


def test_permutation_is_applied(client, admin_headers, make_section, create):
    section_id, ids = _projects(make_section, create)
    permutation = [ids[2], ids[0], ids[3], ids[1]]

    response = client.put(
        f"/api/sections/{section_id}/projects/reorder",
        json={"orderedIds": permutation},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.get_json() == {
        "message": "Order updated successfully",
        "updated": 4,
        "skipped": 0,
        "failed": 0,
    }
    assert _stored_sequence(section_id) == permutation


def test_unknown_and_foreign_ids_are_skipped(client, admin_headers, make_section, create):
    section_id, ids = _projects(make_section, create, count=2)
    other_section = make_section("projects", slug="more-projects")
    foreign = create("projects", {"sectionId": other_section, "title": "Elsewhere"})

    response = client.put(
        f"/api/sections/{section_id}/projects/reorder",
        json={"orderedIds": [ids[1], "temp-123", foreign["id"], ids[0]]},
        headers=admin_headers,
    )

    body = response.get_json()
    assert body["updated"] == 2
    assert body["skipped"] == 2
    assert _stored_sequence(section_id) == [ids[1], ids[0]]


def test_grid_rows_leave_gaps(client, admin_headers, make_section, create):
    section_id, ids = _projects(make_section, create)

    response = client.put(
        f"/api/sections/{section_id}/projects/reorder",
        json={"rows": [[ids[3], ids[2]], [ids[1], ids[0]]], "itemsPerRow": 3},
        headers=admin_headers,
    )

    assert response.status_code == 200
    orders = {row.id: row.order for row in ProjectItem.query.all()}
    assert orders == {ids[3]: 0, ids[2]: 1, ids[1]: 3, ids[0]: 4}


def test_grid_row_longer_than_row_size_is_rejected(client, admin_headers, make_section, create):
    section_id, ids = _projects(make_section, create)

    response = client.put(
        f"/api/sections/{section_id}/projects/reorder",
        json={"rows": [ids], "itemsPerRow": 2},
        headers=admin_headers,
    )

    assert response.status_code == 400


def test_body_shape_is_validated(client, admin_headers, make_section):
    section_id = make_section("projects")
    url = f"/api/sections/{section_id}/projects/reorder"

    assert client.put(url, json={}, headers=admin_headers).status_code == 400
    assert client.put(url, json={"orderedIds": "a,b"}, headers=admin_headers).status_code == 400
    assert client.put(url, json={"orderedIds": [], "rows": []}, headers=admin_headers).status_code == 400


def test_missing_section_or_collection_is_404(client, admin_headers, make_section):
    section_id = make_section("projects")

    missing = client.put("/api/sections/nope/projects/reorder", json={"orderedIds": []}, headers=admin_headers)
    unknown = client.put(
        f"/api/sections/{section_id}/experience-images/reorder",
        json={"orderedIds": []},
        headers=admin_headers,
    )

    assert missing.status_code == 404
    assert unknown.status_code == 404


def test_new_skill_appears_last_then_moves_first(client, admin_headers, make_section, create):
    section_id = make_section("skills")
    existing = create("skills", {"sectionId": section_id, "title": "Python"})
    new = create("skills", {"sectionId": section_id, "title": "X", "description": "Y"})

    skills = client.get("/api/sections").get_json()[0]["skillItems"]
    assert [s["title"] for s in skills] == ["Python", "X"]

    response = client.put(
        "/api/skills/reorder",
        json={"sectionId": section_id, "orderedIds": [new["id"], existing["id"]]},
        headers=admin_headers,
    )
    assert response.status_code == 200

    skills = client.get("/api/sections").get_json()[0]["skillItems"]
    assert [s["title"] for s in skills] == ["X", "Python"]


def test_sections_reorder(client, admin_headers, make_section):
    hero = make_section("hero", order=0)
    contact = make_section("contact", order=1)

    client.put("/api/sections/reorder", json={"orderedIds": [contact, hero]}, headers=admin_headers)

    assert [s["id"] for s in client.get("/api/sections").get_json()] == [contact, hero]


def test_experience_images_reorder(client, admin_headers, make_section, create):
    item = create("experience", {
        "sectionId": make_section("experience"),
        "positionTitle": "Engineer",
        "companyName": "Acme",
    })
    first = create("experience-images", {"experienceItemId": item["id"], "src": "https://cdn/1.png"})
    second = create("experience-images", {"experienceItemId": item["id"], "src": "https://cdn/2.png"})

    response = client.put(
        f"/api/experience/{item['id']}/images/reorder",
        json={"orderedIds": [second["id"], first["id"]]},
        headers=admin_headers,
    )

    assert response.get_json()["updated"] == 2
    experience = client.get("/api/sections").get_json()[0]["experienceItems"][0]
    assert [i["id"] for i in experience["detailImages"]] == [second["id"], first["id"]]
