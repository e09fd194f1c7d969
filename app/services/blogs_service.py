import datetime
import logging
from typing import List, Optional

from app.exceptions import ConflictError, NotFoundError, ValidationError
from app.schemas.blog import BlogCreate, BlogPost, BlogSummary
from app.settings import Settings, settings
from app.utils import is_blank, parse_iso, to_iso, utcnow

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "excerpt", "category", "content", "slug")
_EPOCH = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


class BlogsService:
    def __init__(self, repo, settings_obj: Settings = settings):
        self.repo = repo
        self.settings = settings_obj

    def list_posts(self) -> List[BlogPost]:
        docs = self.repo.list_blog_docs()
        docs.sort(
            key=lambda d: (_sort_date(d, "publishDate"), _sort_date(d, "createdAt")),
            reverse=True,
        )
        return [to_blog_post(doc, self.settings) for doc in docs]

    def list_summaries(self) -> List[BlogSummary]:
        docs = self.repo.list_blog_docs()
        docs.sort(key=lambda d: _sort_date(d, "createdAt"), reverse=True)
        return [
            BlogSummary(id=doc["_id"], title=doc["title"], slug=doc["slug"])
            for doc in docs
        ]

    def get_post(self, slug: str) -> BlogPost:
        doc = self.repo.get_by_slug(slug)
        if not doc:
            raise NotFoundError("Blog not found")
        return to_blog_post(doc, self.settings)

    def create_post(
        self, payload: BlogCreate, now: Optional[datetime.datetime] = None
    ) -> BlogPost:
        missing = [name for name in REQUIRED_FIELDS if is_blank(getattr(payload, name))]
        if missing:
            logger.info(f"Rejected blog post, missing fields: {', '.join(missing)}")
            raise ValidationError("Missing required fields")

        if self.repo.get_by_slug(payload.slug):
            raise ConflictError("Slug already exists")

        now = now or utcnow()
        doc = {
            "title": payload.title,
            "excerpt": payload.excerpt,
            "featuredImage": payload.featuredImage,
            "category": payload.category,
            "content": payload.content,
            "slug": payload.slug,
            "author": payload.author
            if not is_blank(payload.author)
            else self.settings.DEFAULT_AUTHOR,
            "readTime": payload.readTime,
            "tags": list(payload.tags or []),
            "publishDate": to_iso(payload.publishDate or now),
            "createdAt": to_iso(now),
            "updatedAt": to_iso(now),
        }
        saved = self.repo.save(doc)
        logger.info(f"Created blog post {payload.slug} ({saved['_id']})")
        return to_blog_post(saved, self.settings)

    def delete_post(self, slug: str) -> None:
        doc = self.repo.get_by_slug(slug)
        if not doc:
            raise NotFoundError("Blog not found")
        self.repo.delete(doc)
        logger.info(f"Deleted blog post {slug}")


def to_blog_post(doc: dict, settings_obj: Settings = settings) -> BlogPost:
    return BlogPost(
        id=doc["_id"],
        title=doc["title"],
        slug=doc["slug"],
        excerpt=doc["excerpt"],
        content=doc["content"],
        category=doc["category"],
        featuredImage=doc.get("featuredImage"),
        author=doc.get("author") or settings_obj.DEFAULT_AUTHOR,
        readTime=doc.get("readTime"),
        tags=doc.get("tags") or [],
        publishDate=parse_iso(doc.get("publishDate") or doc.get("createdAt")),
        createdAt=parse_iso(doc.get("createdAt")),
        updatedAt=parse_iso(doc.get("updatedAt") or doc.get("createdAt")),
    )


def _sort_date(doc: dict, field: str) -> datetime.datetime:
    try:
        return parse_iso(doc.get(field)) or _EPOCH
    except ValueError:
        logger.warning(f"Unparsable {field} on blog doc {doc.get('_id')}")
        return _EPOCH
