import logging

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from portfolio.domain.exceptions import AssetStoreError

logger = logging.getLogger(__name__)

# Results of uploader.destroy that mean the asset no longer exists
DELETED_RESULTS = ("ok", "not found")


class CloudinaryAssetStore:
    """Server-side client for the remote image host (delete-by-public-id)."""

    def __init__(self, app=None):
        self.cloud_name = None
        self.api_key = None
        self.api_secret = None
        self.upload_preset = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.cloud_name = app.config.get("CLOUDINARY_CLOUD_NAME")
        self.api_key = app.config.get("CLOUDINARY_API_KEY")
        self.api_secret = app.config.get("CLOUDINARY_API_SECRET")
        self.upload_preset = app.config.get("CLOUDINARY_UPLOAD_PRESET")
        app.extensions["asset_store"] = self

        if not self.is_configured:
            logger.warning("Cloudinary credentials missing; remote image deletes will be queued")
            return

        cloudinary.config(
            cloud_name=self.cloud_name,
            api_key=self.api_key,
            api_secret=self.api_secret,
            secure=True,
        )

    @property
    def is_configured(self):
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def upload_config(self):
        return {
            "cloudName": self.cloud_name,
            "uploadPreset": self.upload_preset,
        }

    def destroy(self, public_id):
        """
        Delete a remote asset. Returns True when the asset is gone, including the
        case where the host reports it as already missing.

        Raises AssetStoreError on any SDK or API failure.
        """
        if not public_id:
            return False

        if not self.is_configured:
            raise AssetStoreError("Cloudinary is not configured")

        try:
            response = cloudinary.uploader.destroy(public_id, invalidate=True)
        except CloudinaryError as exc:
            raise AssetStoreError(f"Cloudinary destroy for {public_id} failed: {exc}") from exc

        if not isinstance(response, dict):
            raise AssetStoreError(f"Cloudinary returned an unexpected response for {public_id}")

        result = response.get("result")
        if result not in DELETED_RESULTS:
            raise AssetStoreError(f"Cloudinary destroy for {public_id} returned {result!r}")

        logger.info(f"Remote asset {public_id} deleted ({result})")
        return True
