from __future__ import annotations

from typing import Optional, List, Any, Dict
from pydantic import BaseModel, ConfigDict, Field

from faculty_sync.dto.publication_dto import PublicationDTO

# Field values are Any on purpose: ids may be ints, UUID strings or
# ObjectIds, timestamps datetimes or strings. Nothing is coerced or rejected;
# only the nesting (objects, lists of objects) is fixed.


# ============================================================
# Relational side: one flat row of faculty JOIN department JOIN university
# ============================================================
class RelationalRecordDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    faculty_id: Optional[Any] = None
    department_id: Optional[Any] = None
    university_id: Optional[Any] = None

    first_name: Optional[Any] = None
    last_name: Optional[Any] = None
    title: Optional[Any] = None
    email: Optional[Any] = None
    profile_url: Optional[Any] = None

    university_name: Optional[Any] = None
    department_name: Optional[Any] = None

    # nullable on input; mappers normalize to []
    research_interests: Optional[List[Any]] = None
    publications: Optional[List[PublicationDTO]] = None

    created_at: Optional[Any] = None
    updated_at: Optional[Any] = None


# ============================================================
# Document side: faculty collection document
# ============================================================
class SqlIdsDTO(BaseModel):
    """Relational keys carried inside a document for later reconciliation."""
    model_config = ConfigDict(extra="ignore")

    faculty_id: Optional[Any] = None
    department_id: Optional[Any] = None
    university_id: Optional[Any] = None


class UniversityRefDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[Any] = None
    # SQL id when mapped from a row, ObjectId once stored
    university_id: Optional[Any] = None
    location: Optional[Any] = None
    website: Optional[Any] = None


class DepartmentRefDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[Any] = None
    website: Optional[Any] = None


class FacultyDocumentDTO(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    sql_ids: Optional[SqlIdsDTO] = Field(default=None, alias="_sql_ids")

    first_name: Optional[Any] = None
    last_name: Optional[Any] = None
    title: Optional[Any] = None
    email: Optional[Any] = None
    profile_url: Optional[Any] = None

    university: Optional[UniversityRefDTO] = None
    department: Optional[DepartmentRefDTO] = None

    research_interests: Optional[List[Any]] = None
    publications: Optional[List[PublicationDTO]] = None

    # flexible fields; carried through parsing, never mapped
    courses: Optional[List[Dict[str, Any]]] = None
    research_projects: Optional[List[Dict[str, Any]]] = None
    awards: Optional[List[Dict[str, Any]]] = None
    raw_data: Optional[Dict[str, Any]] = None

    created_at: Optional[Any] = None
    updated_at: Optional[Any] = None

    def to_document(self, *, json_mode: bool = False) -> Dict[str, Any]:
        """
        Dict ready for the faculty collection.

        Absent (None) fields are omitted rather than stored as null, and the
        identity block is keyed as ``_sql_ids``.
        """
        return self.model_dump(
            mode="json" if json_mode else "python",
            by_alias=True,
            exclude_none=True,
        )
