from typing import List, Optional

BLOG_TYPE = "blog"


class CouchBlogsRepo:
    def __init__(self, couch_db):
        self.db = couch_db

    def list_blog_docs(self) -> List[dict]:
        all_docs = [row.get("doc", row) for row in self.db.all(include_docs=True)]
        return [doc for doc in all_docs if self._is_valid(doc)]

    def get_by_slug(self, slug: str) -> Optional[dict]:
        return next(
            (doc for doc in self.list_blog_docs() if doc.get("slug") == slug), None
        )

    def save(self, doc: dict) -> dict:
        return self.db.save({**doc, "type": BLOG_TYPE})

    def delete(self, doc: dict) -> None:
        self.db.delete(doc["_id"])

    @staticmethod
    def _is_valid(doc: dict | None) -> bool:
        if not doc:
            return False
        return doc.get("type") == BLOG_TYPE and not doc.get("_id", "").startswith(
            "_design/"
        )
