import pytest
from flask_jwt_extended import create_access_token

from portfolio import create_app
from portfolio.domain.exceptions import AssetStoreError
from portfolio.extensions import db, asset_store
from portfolio.models import Section


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _auth_headers(is_admin):
    token = create_access_token(
        identity="user-1",
        additional_claims={"is_admin": is_admin, "email": "owner@example.com", "name": "Owner"},
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(app):
    return _auth_headers(True)


@pytest.fixture
def visitor_headers(app):
    return _auth_headers(False)


@pytest.fixture
def destroyed(monkeypatch):
    """Record remote deletes instead of calling the image host."""
    calls = []

    def fake_destroy(public_id):
        calls.append(public_id)
        return True

    monkeypatch.setattr(asset_store, "destroy", fake_destroy)
    return calls


@pytest.fixture
def failing_destroy(monkeypatch):
    calls = []

    def fake_destroy(public_id):
        calls.append(public_id)
        raise AssetStoreError("host unreachable")

    monkeypatch.setattr(asset_store, "destroy", fake_destroy)
    return calls


@pytest.fixture
def make_section(app):
    def _make(section_type, slug=None, visible=True, order=0):
        section = Section()
        section.slug = slug or section_type
        section.title = section_type.upper()
        section.type = section_type
        section.order = order
        section.visible = visible
        section.settings = {}
        db.session.add(section)
        db.session.commit()
        return section.id

    return _make


@pytest.fixture
def create(client, admin_headers):
    """POST an item as admin and return the response JSON, asserting 201."""
    def _create(slug, body):
        response = client.post(f"/api/{slug}", json=body, headers=admin_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _create
