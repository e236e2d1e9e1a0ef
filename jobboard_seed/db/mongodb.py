"""
MongoDB Connection Utility

The job-board app keeps everything in four collections:
- users: students and recruiters
- companies: owned by a recruiter
- jobs: posted by a company's recruiter
- applications: a student applying to a job

The client is created by the caller and passed around explicitly,
so a single seed run owns exactly one connection.
"""
from typing import Optional
from pymongo import MongoClient, ASCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from jobboard_seed.core.config import get_settings
from jobboard_seed.core.exceptions import SeedConnectionError


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "companies": "companies",
    "jobs": "jobs",
    "applications": "applications"
}


def get_mongo_client(uri: Optional[str] = None, timeout_ms: Optional[int] = None) -> MongoClient:
    """
    Create a MongoDB client and make sure the server answers.

    Raises SeedConnectionError if the URI is malformed, the server is
    unreachable or the credentials are rejected.
    """
    settings = get_settings()
    uri = uri or settings.mongo_uri
    timeout_ms = timeout_ms or settings.mongo_timeout_ms

    client = None
    try:
        client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        # ping command checks connection
        client.admin.command('ping')
    except PyMongoError as e:
        if client is not None:
            client.close()
        raise SeedConnectionError(f"MongoDB connection failed: {e}") from e
    return client


def get_mongo_db(client: MongoClient, db_name: Optional[str] = None) -> Database:
    """
    Get the app database.
    Uses the database named in the URI, falling back to MONGODB_DB.
    """
    if db_name:
        return client[db_name]
    return client.get_default_database(default=get_settings().mongodb_db)


def init_mongo_indexes(db: Database):
    """
    Create the indexes the app's models declare.
    Email uniqueness is what makes a duplicate demo account fail loudly.
    """
    db[COLLECTIONS["users"]].create_index([("email", ASCENDING)], unique=True)
