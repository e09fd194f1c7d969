import datetime
import logging
from typing import List, Optional

from app.exceptions import NotFoundError, ValidationError
from app.schemas.gallery import GalleryImage, GalleryImageCreate
from app.settings import Settings, settings
from app.utils import is_blank, parse_iso, to_iso, utcnow

logger = logging.getLogger(__name__)

_EPOCH = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


class GalleryService:
    def __init__(self, repo, media_host, settings_obj: Settings = settings):
        self.repo = repo
        self.media_host = media_host
        self.settings = settings_obj

    def list_images(self) -> List[GalleryImage]:
        docs = self.repo.list_image_docs()
        docs.sort(key=lambda d: parse_iso(d.get("createdAt")) or _EPOCH, reverse=True)
        return [to_gallery_image(doc, self.settings) for doc in docs]

    def create_image(
        self, payload: GalleryImageCreate, now: Optional[datetime.datetime] = None
    ) -> GalleryImage:
        if is_blank(payload.src) or is_blank(payload.publicId):
            raise ValidationError("Missing image data")

        doc = {
            "src": payload.src,
            "publicId": payload.publicId,
            "alt": payload.alt if not is_blank(payload.alt) else self.settings.DEFAULT_IMAGE_ALT,
            "createdAt": to_iso(now or utcnow()),
        }
        saved = self.repo.save(doc)
        logger.info(f"Registered gallery image {saved['_id']} ({payload.publicId})")
        return to_gallery_image(saved, self.settings)

    def delete_image(self, image_id: str) -> None:
        """
        Remove the asset from the media host, then the record.
        If the host call fails the record is left in place.
        """
        doc = self.repo.get(image_id)
        if not doc:
            raise NotFoundError("Image not found")

        self.media_host.destroy(doc["publicId"])
        # Not transactional: a crash here leaves a record whose asset is gone.
        self.repo.delete(doc)
        logger.info(f"Deleted gallery image {image_id} ({doc['publicId']})")


def to_gallery_image(doc: dict, settings_obj: Settings = settings) -> GalleryImage:
    return GalleryImage(
        id=doc["_id"],
        src=doc["src"],
        publicId=doc["publicId"],
        alt=doc.get("alt") or settings_obj.DEFAULT_IMAGE_ALT,
        createdAt=parse_iso(doc.get("createdAt")),
    )
