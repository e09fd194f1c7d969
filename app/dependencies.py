from fastapi import Depends, Request

from app.repos.blogs_repo import CouchBlogsRepo
from app.repos.gallery_repo import CouchGalleryRepo
from app.services.blogs_service import BlogsService
from app.services.gallery_service import GalleryService


def get_couch_db(request: Request):
    return request.app.state.couch_db


def get_media_host(request: Request):
    return request.app.state.media_host


def get_blogs_repo(couch_db=Depends(get_couch_db)):
    return CouchBlogsRepo(couch_db)


def get_gallery_repo(couch_db=Depends(get_couch_db)):
    return CouchGalleryRepo(couch_db)


def get_blogs_service(repo=Depends(get_blogs_repo)):
    return BlogsService(repo=repo)


def get_gallery_service(
    repo=Depends(get_gallery_repo),
    media_host=Depends(get_media_host),
):
    return GalleryService(repo=repo, media_host=media_host)
