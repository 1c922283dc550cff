from portfolio.extensions import db
from portfolio.models import ExperienceDetailImage, PendingAssetDeletion


def _experience_with_images(make_section, create):
    item = create("experience", {
        "sectionId": make_section("experience"),
        "positionTitle": "Engineer",
        "companyName": "Acme",
        "imageSrc": "https://cdn/logo.png",
        "imagePublicId": "logo",
    })
    for public_id in ("d1", "d2"):
        create("experience-images", {
            "experienceItemId": item["id"],
            "src": f"https://cdn/{public_id}.png",
            "imagePublicId": public_id,
        })
    return item


def test_child_images_are_appended_in_order(make_section, create):
    item = _experience_with_images(make_section, create)

    images = ExperienceDetailImage.query.filter_by(experience_item_id=item["id"]).all()

    assert sorted(image.order for image in images) == [0, 1]


def test_delete_removes_children_then_parent_asset(client, admin_headers, make_section, create, destroyed):
    item = _experience_with_images(make_section, create)

    response = client.delete(f"/api/experience/{item['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert ExperienceDetailImage.query.count() == 0
    assert sorted(destroyed[:2]) == ["d1", "d2"]
    assert destroyed[-1] == "logo"


def test_failed_deletes_are_queued_and_purged(client, admin_headers, make_section, create, monkeypatch):
    from portfolio.domain.exceptions import AssetStoreError
    from portfolio.extensions import asset_store

    item = _experience_with_images(make_section, create)

    def unreachable(public_id):
        raise AssetStoreError("timeout")

    monkeypatch.setattr(asset_store, "destroy", unreachable)
    response = client.delete(f"/api/experience/{item['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert {row.public_id for row in PendingAssetDeletion.query.all()} == {"d1", "d2", "logo"}

    still_down = client.post("/api/assets/pending/purge", headers=admin_headers).get_json()
    assert still_down["purged"] == 0
    assert still_down["remaining"] == 3
    assert {row.attempts for row in PendingAssetDeletion.query.all()} == {2}

    monkeypatch.setattr(asset_store, "destroy", lambda public_id: True)
    recovered = client.post("/api/assets/pending/purge", headers=admin_headers).get_json()

    assert recovered["purged"] == 3
    db.session.expire_all()
    assert PendingAssetDeletion.query.count() == 0


def test_education_delete_releases_images(client, admin_headers, make_section, create, destroyed):
    item = create("education", {
        "sectionId": make_section("education"),
        "institution": "MIT",
        "period": "2010-2014",
    })
    create("education-images", {
        "educationItemId": item["id"],
        "src": "https://cdn/diploma.png",
        "imagePublicId": "diploma",
    })

    client.delete(f"/api/education/{item['id']}", headers=admin_headers)

    assert destroyed == ["diploma"]
