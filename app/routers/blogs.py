import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.exceptions import ApiError
from app.schemas.blog import BlogCreate, BlogPost, BlogSummary
from app.schemas.common import MessageResponse
from app.services.blogs_service import BlogsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/blogs", response_model=List[BlogPost])
def list_blogs(service: BlogsService = Depends(deps.get_blogs_service)):
    """All posts, newest publishDate first."""
    try:
        return service.list_posts()
    except (ApiError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing blogs: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch blogs")


@router.get("/api/blogs/{slug}", response_model=BlogPost)
def get_blog(slug: str, service: BlogsService = Depends(deps.get_blogs_service)):
    try:
        return service.get_post(slug)
    except (ApiError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving blog {slug}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching blog")


@router.get("/api/admin/blogs", response_model=List[BlogSummary])
def list_blog_titles(service: BlogsService = Depends(deps.get_blogs_service)):
    """Titles and slugs only, most recently created first."""
    try:
        return service.list_summaries()
    except (ApiError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing blog titles: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch blog list")


@router.post("/api/blogs", response_model=BlogPost, status_code=201)
def create_blog(
    payload: BlogCreate, service: BlogsService = Depends(deps.get_blogs_service)
):
    try:
        return service.create_post(payload)
    except (ApiError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Create error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create blog")


@router.delete("/api/blogs/slug/{slug}", response_model=MessageResponse)
def delete_blog(slug: str, service: BlogsService = Depends(deps.get_blogs_service)):
    try:
        service.delete_post(slug)
        return {"message": "Blog deleted successfully"}
    except (ApiError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Unexpected error deleting blog {slug}: {e}")
        raise HTTPException(status_code=500, detail="Delete failed")
