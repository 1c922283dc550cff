from portfolio.extensions import db
from portfolio.models import Category


def _category(client, admin_headers, name):
    response = client.post("/api/categories", json={"name": name}, headers=admin_headers)
    assert response.status_code == 201
    return response.get_json()["id"]


def _project_ids_of(category_id):
    db.session.expire_all()
    return set(db.session.get(Category, category_id).project_ids)


def test_project_category_ids_update_both_sides(client, admin_headers, make_section, create):
    web = _category(client, admin_headers, "Web")
    ml = _category(client, admin_headers, "ML")
    project = create("projects", {"sectionId": make_section("projects"), "title": "Site", "categoryIds": [web]})

    assert project["categoryIds"] == [web]

    response = client.put(f"/api/projects/{project['id']}", json={"categoryIds": [ml]}, headers=admin_headers)

    assert response.status_code == 200
    assert response.get_json()["categoryIds"] == [ml]
    assert _project_ids_of(web) == set()
    assert _project_ids_of(ml) == {project["id"]}


def test_unknown_category_ids_are_rejected(client, admin_headers, make_section, create):
    project = create("projects", {"sectionId": make_section("projects"), "title": "Site"})

    response = client.put(
        f"/api/projects/{project['id']}",
        json={"categoryIds": ["ghost"]},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert "ghost" in response.get_json()["message"]


def test_category_ids_must_be_strings(client, admin_headers, make_section, create):
    project = create("projects", {"sectionId": make_section("projects"), "title": "Site"})

    response = client.put(f"/api/projects/{project['id']}", json={"categoryIds": [1, 2]}, headers=admin_headers)

    assert response.status_code == 400


def test_deleting_project_detaches_it_and_keeps_others(client, admin_headers, make_section, create):
    c1 = _category(client, admin_headers, "C1")
    c2 = _category(client, admin_headers, "C2")
    section_id = make_section("projects")
    doomed = create("projects", {"sectionId": section_id, "title": "Old", "categoryIds": [c1, c2]})
    kept = create("projects", {"sectionId": section_id, "title": "Keep", "categoryIds": [c1]})

    response = client.delete(f"/api/projects/{doomed['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert _project_ids_of(c1) == {kept["id"]}
    assert _project_ids_of(c2) == set()


def test_category_crud(client, admin_headers, make_section, create):
    project = create("projects", {"sectionId": make_section("projects"), "title": "Site"})
    category_id = _category(client, admin_headers, "Design")

    duplicate = client.post("/api/categories", json={"name": "design"}, headers=admin_headers)
    blank = client.post("/api/categories", json={"name": "  "}, headers=admin_headers)
    assert duplicate.status_code == 409
    assert blank.status_code == 400

    updated = client.put(
        f"/api/categories/{category_id}",
        json={"name": "UX", "projectIds": [project["id"]]},
        headers=admin_headers,
    ).get_json()
    assert updated["name"] == "UX"
    assert updated["projectIds"] == [project["id"]]

    listed = client.get("/api/categories").get_json()
    assert listed == [updated]

    assert client.delete(f"/api/categories/{category_id}", headers=admin_headers).status_code == 200
    assert client.delete(f"/api/categories/{category_id}", headers=admin_headers).status_code == 404

    sections = client.get("/api/sections").get_json()
    assert sections[0]["projectItems"][0]["categoryIds"] == []


def test_categories_are_listed_by_name(client, admin_headers):
    for name in ("Zeta", "Alpha", "Mid"):
        _category(client, admin_headers, name)

    names = [c["name"] for c in client.get("/api/categories").get_json()]

    assert names == ["Alpha", "Mid", "Zeta"]
