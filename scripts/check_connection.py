#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify MongoDB is reachable and indexes can be created.
Usage: python scripts/check_connection.py
"""
import sys
sys.path.insert(0, '.')

from app.db.mongodb import test_mongo_connection, init_mongo_indexes
from app.core.config import get_settings


def main() -> int:
    settings = get_settings()
    print("=" * 50)
    print(f"{settings.app_name.upper()} - CONNECTION CHECK")
    print("=" * 50)

    print("\n[1] Testing MongoDB...")
    print(f"    URL: {settings.mongo_url}")
    if not test_mongo_connection():
        print("    ❌ MongoDB: FAILED")
        return 1
    print("    ✅ MongoDB: CONNECTED")

    print("\n[2] Creating indexes...")
    init_mongo_indexes()
    print("    ✅ Indexes: OK")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
