"""Bidirectional mapping between the SQL and MongoDB faculty schemas."""
from faculty_sync.mappers import sql_to_mongo, mongo_to_sql
from faculty_sync.services import InvalidDirectionError, SyncDirection, synchronize_data

__all__ = [
    "sql_to_mongo",
    "mongo_to_sql",
    "synchronize_data",
    "SyncDirection",
    "InvalidDirectionError",
]
