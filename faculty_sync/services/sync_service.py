from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from faculty_sync.dto.faculty_dto import FacultyDocumentDTO, RelationalRecordDTO
from faculty_sync.dto.payload_dto import RelationalPayloadDTO
from faculty_sync.mappers.document_to_payload import mongo_to_sql
from faculty_sync.mappers.record_to_document import sql_to_mongo
from faculty_sync.services.sync_errors import InvalidDirectionError

logger = logging.getLogger(__name__)


class SyncDirection(str, Enum):
    SQL_TO_MONGO = "sql-to-mongo"
    MONGO_TO_SQL = "mongo-to-sql"


def parse_direction(direction: Union[SyncDirection, str]) -> SyncDirection:
    """Accepts the enum or its string value; anything else is rejected."""
    if isinstance(direction, SyncDirection):
        return direction
    try:
        return SyncDirection(direction)
    except ValueError:
        raise InvalidDirectionError(direction) from None


def synchronize_data(
    direction: Union[SyncDirection, str],
    data: Union[RelationalRecordDTO, FacultyDocumentDTO, Mapping[str, Any], None],
    options: Optional[Dict[str, Any]] = None,
) -> Union[FacultyDocumentDTO, RelationalPayloadDTO]:
    """
    Maps data in the requested direction and returns the result.

    Nothing is written to either database: the mapped value is handed back
    for the caller to persist. `options` is accepted for callers that already
    pass one; no option is read yet.

    Raises InvalidDirectionError for any direction other than
    "sql-to-mongo" / "mongo-to-sql".
    """
    d = parse_direction(direction)

    if options:
        logger.debug("synchronize_data ignoring options=%s", sorted(options))

    if d is SyncDirection.SQL_TO_MONGO:
        return sql_to_mongo(data)
    return mongo_to_sql(data)
