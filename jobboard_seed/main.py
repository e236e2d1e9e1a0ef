"""
Job Board Demo Seeder - Main Entry Point

Wipes the job-board collections and inserts demo users, companies,
jobs and applications. Reads MONGO_URI from the environment (or .env).

Run: python -m jobboard_seed.main
Exit code: 0 on success, 1 on any failure.
"""

import sys

from pydantic import ValidationError

from jobboard_seed.core.config import get_settings
from jobboard_seed.core.exceptions import SeedError, SeedConnectionError
from jobboard_seed.db.mongodb import get_mongo_client, get_mongo_db
from jobboard_seed.services.seed_service import FixtureLoader


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        client = get_mongo_client(settings.mongo_uri)
    except SeedConnectionError as e:
        print(f"❌ DB Connection failed: {e}", file=sys.stderr)
        return 1
    print(f"✅ MongoDB connected for seeding ({settings.masked_mongo_uri})")

    try:
        result = FixtureLoader(get_mongo_db(client)).run()
    except SeedError as e:
        print(f"❌ Seeding failed: {e}", file=sys.stderr)
        return 1
    finally:
        client.close()

    counts = ", ".join(f"{count} {name}" for name, count in result.counts.items())
    print(f"🌱 Seed data inserted successfully! ({counts})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
