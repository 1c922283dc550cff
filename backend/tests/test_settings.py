def test_first_read_creates_defaults(client):
    response = client.get("/api/settings")

    body = response.get_json()
    assert response.status_code == 200
    assert body["theme"] == "dark"
    assert body["siteTitle"] == "PORTFOLIO"
    assert body["showPortrait"] is True
    assert body["resumeUrl"] == "/resume.pdf"
    assert body["globalFontFamily"] == "font-sans"

    assert client.get("/api/settings").get_json()["id"] == body["id"]


def test_update_is_sparse_and_creates_row(client, admin_headers):
    response = client.put("/api/settings", json={"showPortrait": False}, headers=admin_headers)

    body = response.get_json()
    assert response.status_code == 200
    assert body["showPortrait"] is False
    assert body["theme"] == "dark"


def test_update_rejects_unknown_or_mistyped_fields(client, admin_headers):
    assert client.put("/api/settings", json={"colour": "red"}, headers=admin_headers).status_code == 400
    assert client.put("/api/settings", json={"showPortrait": "no"}, headers=admin_headers).status_code == 400


def test_settings_write_requires_admin(client, visitor_headers):
    response = client.put("/api/settings", json={"theme": "light"}, headers=visitor_headers)

    assert response.status_code == 403
