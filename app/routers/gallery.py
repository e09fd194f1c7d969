import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.exceptions import ApiError, MediaHostError
from app.schemas.common import MessageResponse
from app.schemas.gallery import GalleryImage, GalleryImageCreate
from app.services.gallery_service import GalleryService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/gallery", response_model=List[GalleryImage])
def list_images(service: GalleryService = Depends(deps.get_gallery_service)):
    """All registered images, newest first."""
    try:
        return service.list_images()
    except (ApiError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing images: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch images")


@router.post("/api/gallery", response_model=GalleryImage, status_code=201)
def register_image(
    payload: GalleryImageCreate,
    service: GalleryService = Depends(deps.get_gallery_service),
):
    """Record an asset the frontend has already uploaded to Cloudinary."""
    try:
        return service.create_image(payload)
    except (ApiError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Unexpected error saving image: {e}")
        raise HTTPException(status_code=500, detail="Failed to save image")


@router.delete("/api/gallery/{image_id}", response_model=MessageResponse)
def delete_image(
    image_id: str, service: GalleryService = Depends(deps.get_gallery_service)
):
    """Delete the asset at Cloudinary, then the record."""
    try:
        service.delete_image(image_id)
        return {"message": "Image deleted successfully"}
    except MediaHostError as e:
        logger.error(f"Media host delete failed for image {image_id}: {e.message}")
        raise HTTPException(status_code=500, detail="Delete failed")
    except (ApiError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Unexpected error deleting image {image_id}: {e}")
        raise HTTPException(status_code=500, detail="Delete failed")
