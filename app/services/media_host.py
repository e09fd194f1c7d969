import logging

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader

from app.exceptions import MediaHostError
from app.settings import Settings, settings

logger = logging.getLogger(__name__)

ACCEPTED_RESULTS = ("ok", "not found")


class CloudinaryClient:
    """Deletes uploaded assets from Cloudinary. Uploads happen client-side."""

    def __init__(self, settings_obj: Settings = settings):
        self.settings = settings_obj
        cloudinary.config(
            cloud_name=settings_obj.CLOUDINARY_CLOUD_NAME,
            api_key=settings_obj.CLOUDINARY_API_KEY,
            api_secret=settings_obj.CLOUDINARY_API_SECRET,
            secure=True,
        )

    def destroy(self, public_id: str) -> str:
        s = self.settings
        if not (s.CLOUDINARY_CLOUD_NAME and s.CLOUDINARY_API_KEY and s.CLOUDINARY_API_SECRET):
            raise MediaHostError("Cloudinary credentials are not configured")

        try:
            response = cloudinary.uploader.destroy(public_id)
        except cloudinary.exceptions.Error as e:
            logger.error(f"Cloudinary destroy for {public_id} failed: {e}")
            raise MediaHostError("Media host request failed") from e

        result = (response or {}).get("result")
        if result not in ACCEPTED_RESULTS:
            logger.error(f"Unexpected Cloudinary destroy result for {public_id}: {result}")
            raise MediaHostError("Media host rejected the delete request")
        if result == "not found":
            logger.warning(f"Asset {public_id} was already missing at Cloudinary")
        return result
