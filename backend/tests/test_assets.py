import cloudinary
import cloudinary.uploader
import pytest
from cloudinary.exceptions import Error as CloudinaryError

from portfolio.assets import CloudinaryAssetStore
from portfolio.domain.exceptions import AssetStoreError


@pytest.fixture
def store(app):
    return CloudinaryAssetStore(app)


@pytest.fixture
def sdk_destroy(monkeypatch):
    """Replace the SDK call; set ``reply`` to control what it returns."""
    calls = []
    state = {"reply": {"result": "ok"}}

    def fake_destroy(public_id, **options):
        calls.append((public_id, options))
        reply = state["reply"]
        if isinstance(reply, Exception):
            raise reply
        return reply

    monkeypatch.setattr(cloudinary.uploader, "destroy", fake_destroy)
    return calls, state


def test_init_app_configures_sdk(store):
    config = cloudinary.config()

    assert config.cloud_name == "demo-cloud"
    assert config.api_key == "123456"
    assert config.api_secret == "shh"


def test_destroy_calls_sdk(store, sdk_destroy):
    calls, _ = sdk_destroy

    assert store.destroy("portfolio/a") is True
    assert calls == [("portfolio/a", {"invalidate": True})]


def test_destroy_treats_missing_asset_as_deleted(store, sdk_destroy):
    _, state = sdk_destroy
    state["reply"] = {"result": "not found"}

    assert store.destroy("gone") is True


@pytest.mark.parametrize("reply", [
    {"result": "error"},
    {},
    ["unexpected"],
    None,
    CloudinaryError("Socket error"),
])
def test_destroy_maps_failures_to_asset_store_error(store, sdk_destroy, reply):
    _, state = sdk_destroy
    state["reply"] = reply

    with pytest.raises(AssetStoreError):
        store.destroy("abc")


def test_unconfigured_store_refuses_to_delete(app, sdk_destroy):
    calls, _ = sdk_destroy
    store = CloudinaryAssetStore()

    with pytest.raises(AssetStoreError, match="not configured"):
        store.destroy("abc")
    assert store.destroy("") is False
    assert calls == []


def test_upload_config_exposes_cloud_and_preset(client, admin_headers):
    response = client.get("/api/uploads/config", headers=admin_headers)

    assert response.status_code == 200
    assert response.get_json() == {"cloudName": "demo-cloud", "uploadPreset": "portfolio_unsigned"}
