from .record_to_document import sql_to_mongo
from .document_to_payload import mongo_to_sql
from .row_to_record import relational_record_from_faculty

__all__ = [
    "sql_to_mongo",
    "mongo_to_sql",
    "relational_record_from_faculty",
]
