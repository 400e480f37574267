"""
MongoDB Connection Utility

MongoDB stores every record kind in its own collection:
- jobs, training_content, marketplace, schemes: listing records
- users: accounts, roles and display names used for enrichment
"""
import logging

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from app.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongo_url, tz_aware=True)
    return _client


def get_mongo_db() -> Database:
    """
    Get the application database.
    Also used as the FastAPI dependency that routes receive storage through.
    """
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client.get_default_database(settings.db_name)
    return _db


def close_mongo_client() -> None:
    global _client, _db
    if _client is not None:
        _client.close()
    _client = None
    _db = None


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "jobs": "jobs",
    "training": "training_content",
    "marketplace": "marketplace",
    "schemes": "schemes",
}

# Filter dimensions indexed per collection
INDEXED_FIELDS = {
    "jobs": ["category", "location", "language"],
    "training": ["type", "language"],
    "marketplace": ["location", "language"],
    "schemes": ["category", "language"],
}


def init_mongo_indexes(db: Database = None):
    """
    Create indexes for better query performance.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()

    db[COLLECTIONS["users"]].create_index("email", unique=True)

    for key, fields in INDEXED_FIELDS.items():
        collection = db[COLLECTIONS[key]]
        for field in fields:
            collection.create_index([(field, ASCENDING)])
        collection.create_index([("createdBy", ASCENDING)])
        collection.create_index([("createdAt", DESCENDING)])

    logger.info("MongoDB indexes created successfully")
