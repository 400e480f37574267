"""
User Service - account storage and owner-name lookup.

The users collection is also what record enrichment reads:
every listed record gets created_by_name from its createdBy reference.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from bson import ObjectId
from pymongo.database import Database

from app.db.mongodb import COLLECTIONS
from app.schemas.schemas import UserResponse


class UserService:
    """Handles the users collection."""

    def __init__(self, db: Database):
        self.collection = db[COLLECTIONS["users"]]

    def get_by_id(self, user_id: Any) -> Optional[dict]:
        """Fetch a user by ObjectId (or UserIdentity)."""
        user_id = getattr(user_id, "value", user_id)
        return self.collection.find_one({"_id": user_id})

    def get_by_email(self, email: str) -> Optional[dict]:
        return self.collection.find_one({"email": email.lower()})

    def create(self, name: str, email: str, password_hash: str, role: str) -> dict:
        """
        Insert a new account.
        Raises pymongo DuplicateKeyError if the e-mail is taken (unique index).
        """
        now = datetime.now(timezone.utc)
        doc = {
            "name": name,
            "email": email.lower(),
            "password_hash": password_hash,
            "role": role,
            "is_active": True,
            "createdAt": now,
            "updatedAt": now,
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def get_names(self, user_ids: Iterable[ObjectId]) -> Dict[ObjectId, str]:
        """Map user ids to display names in one query."""
        ids = list({uid for uid in user_ids if uid is not None})
        if not ids:
            return {}
        cursor = self.collection.find({"_id": {"$in": ids}}, {"name": 1})
        return {doc["_id"]: doc.get("name") for doc in cursor}

    def attach_owner_names(self, records: List[dict]) -> List[dict]:
        """Add created_by_name to each record (None when the owner is gone)."""
        names = self.get_names(r.get("createdBy") for r in records)
        return [{**r, "created_by_name": names.get(r.get("createdBy"))} for r in records]


def public_user(doc: dict) -> dict:
    """User document without credentials."""
    return UserResponse(
        id=str(doc["_id"]),
        name=doc.get("name", ""),
        email=doc.get("email", ""),
        role=doc.get("role"),
    ).model_dump(mode="json")
