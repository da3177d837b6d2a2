from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from faculty_sync.dto.faculty_dto import (
    RelationalRecordDTO,
    FacultyDocumentDTO,
    SqlIdsDTO,
    UniversityRefDTO,
    DepartmentRefDTO,
)
from faculty_sync.mappers.normalize import (
    normalize_publications,
    normalize_research_interests,
)

logger = logging.getLogger(__name__)


def _as_record(data: Union[RelationalRecordDTO, Mapping[str, Any], None]) -> RelationalRecordDTO:
    if isinstance(data, RelationalRecordDTO):
        return data
    return RelationalRecordDTO.model_validate(dict(data or {}))


# ─────────────────────────────
# Flat relational row → faculty document
# ─────────────────────────────

def sql_to_mongo(data: Union[RelationalRecordDTO, Mapping[str, Any], None]) -> FacultyDocumentDTO:
    """
    Maps one flat faculty/department/university row into a faculty document.

    - university_name / department_name become the nested university / department blocks
    - university_id lands in both university.university_id and _sql_ids
    - research_interests / publications default to [] when missing
    - the three relational ids are always copied into _sql_ids so the
      document can be mapped back onto the same rows later
    """
    r = _as_record(data)

    doc = FacultyDocumentDTO(
        first_name=r.first_name,
        last_name=r.last_name,
        title=r.title,
        email=r.email,
        profile_url=r.profile_url,
        university=UniversityRefDTO(
            name=r.university_name,
            university_id=r.university_id,
        ),
        department=DepartmentRefDTO(
            name=r.department_name,
        ),
        research_interests=normalize_research_interests(r.research_interests),
        publications=normalize_publications(r.publications),
        created_at=r.created_at,
        updated_at=r.updated_at,
        sql_ids=SqlIdsDTO(
            faculty_id=r.faculty_id,
            department_id=r.department_id,
            university_id=r.university_id,
        ),
    )

    logger.debug(
        "sql_to_mongo faculty_id=%s interests=%d publications=%d",
        r.faculty_id, len(doc.research_interests), len(doc.publications),
    )
    return doc
