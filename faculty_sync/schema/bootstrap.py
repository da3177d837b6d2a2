from __future__ import annotations

import logging
from typing import Any, Dict, List

from faculty_sync.config import settings
from faculty_sync.schema.indexes import INDEXES
from faculty_sync.schema.validators import FACULTY_VALIDATOR, UNIVERSITIES_VALIDATOR

logger = logging.getLogger(__name__)


def collection_validators() -> Dict[str, Dict[str, Any]]:
    return {
        settings.universities_collection: UNIVERSITIES_VALIDATOR,
        settings.faculty_collection: FACULTY_VALIDATOR,
    }


def apply_schema(database) -> List[str]:
    """
    Create both validated collections and every index on `database`.

    `database` is a pymongo-style handle: it must provide
    create_collection(name, validator=...) and database[name].create_index(keys, **opts).
    Connection handling stays with the caller.

    Returns the index names reported by create_index, in creation order.
    """
    for name, validator in collection_validators().items():
        logger.info("Creating collection %s", name)
        database.create_collection(name, validator=validator)

    created: List[str] = []
    for spec in INDEXES:
        idx_name = database[spec.collection].create_index(list(spec.keys), **spec.options())
        logger.info("Created index %s on %s", idx_name, spec.collection)
        created.append(idx_name)

    logger.info("Document schema for %s created (%d indexes)", settings.mongo_database, len(created))
    return created


def describe_schema() -> Dict[str, Any]:
    return {
        "database": settings.mongo_database,
        "collections": collection_validators(),
        "indexes": [spec.to_dict() for spec in INDEXES],
    }
