import uuid

import pycouchdb


class FakeCouchDB:
    """
    Minimal in-memory CouchDB stand-in.
    Set track_calls=True to record the order of calls.
    """

    def __init__(self, docs: dict | None = None, track_calls: bool = False):
        self.docs = docs or {}
        self.track_calls = track_calls
        self.calls = []

    def _track(self, call: str):
        if self.track_calls:
            self.calls.append(call)

    def get(self, doc_id: str) -> dict:
        self._track(f"get({doc_id})")
        if doc_id not in self.docs:
            raise pycouchdb.exceptions.NotFound(doc_id)
        return dict(self.docs[doc_id])

    def all(self, include_docs: bool = True):
        self._track(f"all(include_docs={include_docs})")
        if include_docs:
            return [
                {"id": doc_id, "doc": dict(doc)} for doc_id, doc in self.docs.items()
            ]
        return [{"id": doc_id} for doc_id in self.docs]

    def save(self, doc: dict) -> dict:
        saved = dict(doc)
        saved.setdefault("_id", uuid.uuid4().hex)
        self._track(f"save({saved['_id']})")
        if saved["_id"] in self.docs and "_rev" not in saved:
            raise pycouchdb.exceptions.Conflict("Document update conflict.")
        saved["_rev"] = f"1-{uuid.uuid4().hex}"
        self.docs[saved["_id"]] = saved
        return dict(saved)

    def delete(self, doc_or_id):
        doc_id = doc_or_id["_id"] if isinstance(doc_or_id, dict) else doc_or_id
        self._track(f"delete({doc_id})")
        if doc_id not in self.docs:
            raise pycouchdb.exceptions.NotFound(doc_id)
        del self.docs[doc_id]


class FakeMediaHost:
    """
    Media host stand-in. Records destroyed public ids; set error to make destroy fail.
    """

    def __init__(self, error: Exception | None = None, result: str = "ok"):
        self.error = error
        self.result = result
        self.destroyed = []

    def destroy(self, public_id: str) -> str:
        if self.error:
            raise self.error
        self.destroyed.append(public_id)
        return self.result


def blog_doc(slug: str, **overrides) -> dict:
    doc = {
        "_id": f"id-{slug}",
        "type": "blog",
        "title": slug.replace("-", " ").title(),
        "excerpt": "Excerpt",
        "content": "Body",
        "category": "News",
        "slug": slug,
        "author": "Admin",
        "tags": [],
        "publishDate": "2024-01-01T00:00:00+00:00",
        "createdAt": "2024-01-01T00:00:00+00:00",
        "updatedAt": "2024-01-01T00:00:00+00:00",
    }
    doc.update(overrides)
    return doc


def image_doc(image_id: str, **overrides) -> dict:
    doc = {
        "_id": image_id,
        "type": "gallery_image",
        "src": f"https://res.cloudinary.com/demo/image/upload/{image_id}.jpg",
        "publicId": f"gallery/{image_id}",
        "alt": "Event Image",
        "createdAt": "2024-01-01T00:00:00+00:00",
    }
    doc.update(overrides)
    return doc
