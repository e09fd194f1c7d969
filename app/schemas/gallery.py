import datetime
from typing import Optional

from pydantic import BaseModel


class GalleryImageCreate(BaseModel):
    src: Optional[str] = None
    publicId: Optional[str] = None
    alt: Optional[str] = None


class GalleryImage(BaseModel):
    id: str
    src: str
    publicId: str
    alt: str
    createdAt: datetime.datetime
