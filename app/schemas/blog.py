import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class BlogCreate(BaseModel):
    """Create payload. Required fields are checked by BlogsService."""

    title: Optional[str] = None
    excerpt: Optional[str] = None
    featuredImage: Optional[str] = None
    category: Optional[str] = None
    content: Optional[str] = None
    slug: Optional[str] = None
    author: Optional[str] = None
    readTime: Optional[float] = None
    tags: Optional[List[str]] = None
    publishDate: Optional[datetime.datetime] = None


class BlogSummary(BaseModel):
    id: str
    title: str
    slug: str


class BlogPost(BlogSummary):
    excerpt: str
    content: str
    category: str
    featuredImage: Optional[str] = None
    author: str
    readTime: Optional[float] = None
    tags: List[str] = Field(default_factory=list)
    publishDate: datetime.datetime
    createdAt: datetime.datetime
    updatedAt: datetime.datetime
