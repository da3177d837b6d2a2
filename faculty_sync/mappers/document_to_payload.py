from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from faculty_sync.dto.faculty_dto import (
    FacultyDocumentDTO,
    SqlIdsDTO,
    UniversityRefDTO,
    DepartmentRefDTO,
)
from faculty_sync.dto.payload_dto import (
    RelationalPayloadDTO,
    UniversityRowDTO,
    DepartmentRowDTO,
    FacultyRowDTO,
    ResearchInterestRowDTO,
)
from faculty_sync.dto.publication_dto import PublicationDTO, PublicationRowDTO
from faculty_sync.mappers.normalize import list_or_empty

logger = logging.getLogger(__name__)


def _as_document(data: Union[FacultyDocumentDTO, Mapping[str, Any], None]) -> FacultyDocumentDTO:
    if isinstance(data, FacultyDocumentDTO):
        return data
    return FacultyDocumentDTO.model_validate(dict(data or {}))


def map_research_interests(interests: Optional[List[Any]]) -> List[ResearchInterestRowDTO]:
    return [ResearchInterestRowDTO(name=i) for i in list_or_empty(interests)]


def map_publication_rows(publications: Optional[List[PublicationDTO]]) -> List[PublicationRowDTO]:
    """authors has no column on the relational side and is dropped."""
    return [
        PublicationRowDTO(
            title=p.title,
            venue=p.venue,
            year=p.year,
            doi=p.doi,
            url=p.url,
            is_primary_author=p.is_primary_author,
        )
        for p in list_or_empty(publications)
    ]


# ─────────────────────────────
# Faculty document → per-table relational payload
# ─────────────────────────────

def mongo_to_sql(data: Union[FacultyDocumentDTO, Mapping[str, Any], None]) -> RelationalPayloadDTO:
    """
    Splits a faculty document into university / department / faculty rows
    plus research interest and publication rows.

    Ids come only from _sql_ids. When it is missing, every id is None and the
    caller must insert new rows instead of updating existing ones.
    """
    doc = _as_document(data)

    ids = doc.sql_ids or SqlIdsDTO()
    uni = doc.university or UniversityRefDTO()
    dept = doc.department or DepartmentRefDTO()

    payload = RelationalPayloadDTO(
        university=UniversityRowDTO(
            university_id=ids.university_id,
            name=uni.name,
            location=uni.location,
            website=uni.website,
        ),
        department=DepartmentRowDTO(
            department_id=ids.department_id,
            university_id=ids.university_id,
            name=dept.name,
            website=dept.website,
        ),
        faculty=FacultyRowDTO(
            faculty_id=ids.faculty_id,
            department_id=ids.department_id,
            first_name=doc.first_name,
            last_name=doc.last_name,
            title=doc.title,
            email=doc.email,
            profile_url=doc.profile_url,
        ),
        research_interests=map_research_interests(doc.research_interests),
        publications=map_publication_rows(doc.publications),
    )

    if payload.is_insert:
        logger.debug("mongo_to_sql: no _sql_ids.faculty_id, payload is an insert")
    return payload
