from typing import List, Optional

import pycouchdb

GALLERY_TYPE = "gallery_image"


class CouchGalleryRepo:
    def __init__(self, couch_db):
        self.db = couch_db

    def list_image_docs(self) -> List[dict]:
        all_docs = [row.get("doc", row) for row in self.db.all(include_docs=True)]
        return [doc for doc in all_docs if self._is_valid(doc)]

    def get(self, image_id: str) -> Optional[dict]:
        try:
            doc = self.db.get(image_id)
        except pycouchdb.exceptions.NotFound:
            return None
        return doc if self._is_valid(doc) else None

    def save(self, doc: dict) -> dict:
        return self.db.save({**doc, "type": GALLERY_TYPE})

    def delete(self, doc: dict) -> None:
        self.db.delete(doc["_id"])

    @staticmethod
    def _is_valid(doc: dict | None) -> bool:
        return bool(doc) and doc.get("type") == GALLERY_TYPE
