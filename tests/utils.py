"""
Test helpers.
"""

from datetime import datetime, timezone

from app.core.auth import create_access_token
from tests.fakes import FakeDatabase


def make_user(db: FakeDatabase, name: str, role: str, email: str = None, is_active: bool = True) -> dict:
    """Insert a user directly and return it with a bearer header attached."""
    now = datetime.now(timezone.utc)
    doc = {
        "name": name,
        "email": email or f"{name.lower().replace(' ', '.')}@example.com",
        "password_hash": None,
        "role": role,
        "is_active": is_active,
        "createdAt": now,
        "updatedAt": now,
    }
    db["users"].insert_one(doc)
    token = create_access_token({"sub": str(doc["_id"]), "role": role})
    return {**doc, "headers": {"Authorization": f"Bearer {token}"}}
