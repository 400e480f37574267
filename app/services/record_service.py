"""
Record Service - CRUD operations for the listing collections.

One RecordService wraps one collection (jobs, training_content,
marketplace, schemes). Every record carries:
- createdBy: owner's user ObjectId, set once on insert
- createdAt / updatedAt: written here on every insert/update
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection

from app.utils.pagination import Pager


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def parse_object_id(raw: Any) -> Optional[ObjectId]:
    """ObjectId from a path parameter, or None if malformed."""
    if isinstance(raw, ObjectId):
        return raw
    try:
        return ObjectId(str(raw))
    except (InvalidId, TypeError):
        return None


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    if isinstance(doc.get("createdBy"), ObjectId):
        doc["createdBy"] = str(doc["createdBy"])
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Newest first; _id breaks ties between records written in the same instant
NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


class RecordService:
    """
    Handles storage for one record kind.
    Documents are returned raw (ObjectIds intact); routes serialize.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def find_page(self, query: Dict[str, Any], pager: Pager) -> Tuple[List[dict], int]:
        """
        Fetch one page of records matching query, newest first.

        Returns:
            (records on this page, total records matching query)
        """
        total = self.collection.count_documents(query)
        if pager.offset >= total:
            # past the last page; offset may not even fit in a 64-bit skip
            return [], total
        cursor = (
            self.collection.find(query)
            .sort(NEWEST_FIRST)
            .skip(pager.offset)
            .limit(pager.limit)
        )
        return list(cursor), total

    def get_by_id(self, record_id: ObjectId) -> Optional[dict]:
        return self.collection.find_one({"_id": record_id})

    def insert(self, data: Dict[str, Any], owner_id: ObjectId) -> dict:
        """
        Insert a validated record owned by owner_id.

        Returns:
            The stored document including _id and timestamps
        """
        now = utcnow()
        doc = {
            **data,
            "createdBy": owner_id,
            "createdAt": now,
            "updatedAt": now,
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def update(self, record_id: ObjectId, data: Dict[str, Any]) -> Optional[dict]:
        """Overwrite the validated fields. Owner and createdAt are never touched."""
        changes = {k: v for k, v in data.items() if k not in ("_id", "createdBy", "createdAt")}
        changes["updatedAt"] = utcnow()
        return self.collection.find_one_and_update(
            {"_id": record_id},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, record_id: ObjectId) -> bool:
        result = self.collection.delete_one({"_id": record_id})
        return result.deleted_count > 0
