#!/usr/bin/env python3
"""
Connection Check Script

Verifies MONGO_URI works and shows how many documents each
job-board collection holds. Read-only; run it before and after seeding.
Usage: python scripts/check_connection.py
"""
import sys
sys.path.insert(0, '.')

from jobboard_seed.core.config import get_settings
from jobboard_seed.core.exceptions import SeedConnectionError
from jobboard_seed.db.mongodb import get_mongo_client, get_mongo_db, COLLECTIONS


def main() -> int:
    settings = get_settings()
    print("=" * 50)
    print("JOB BOARD SEEDER - CONNECTION CHECK")
    print("=" * 50)

    print(f"\n    URI: {settings.masked_mongo_uri}")
    try:
        client = get_mongo_client(settings.mongo_uri)
    except SeedConnectionError as e:
        print(f"    ❌ MongoDB: FAILED ({e})")
        return 1
    print("    ✅ MongoDB: CONNECTED")

    try:
        db = get_mongo_db(client)
        print(f"    Database: {db.name}\n")
        for collection in COLLECTIONS.values():
            print(f"    {collection:<14} {db[collection].count_documents({})}")
    finally:
        client.close()

    print("\n" + "=" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
