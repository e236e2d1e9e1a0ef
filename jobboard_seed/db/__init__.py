"""
Database module - MongoDB connection.
"""
from jobboard_seed.db.mongodb import get_mongo_client, get_mongo_db, init_mongo_indexes, COLLECTIONS

__all__ = [
    "get_mongo_client",
    "get_mongo_db",
    "init_mongo_indexes",
    "COLLECTIONS"
]
