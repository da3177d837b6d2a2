from __future__ import annotations

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field

from faculty_sync.dto.publication_dto import PublicationRowDTO


# ============================================================
# Per-table row DTOs (match db.models column names)
# ============================================================
class UniversityRowDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    university_id: Optional[Any] = None
    name: Optional[Any] = None
    location: Optional[Any] = None
    website: Optional[Any] = None


class DepartmentRowDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    department_id: Optional[Any] = None
    university_id: Optional[Any] = None
    name: Optional[Any] = None
    website: Optional[Any] = None


class FacultyRowDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    faculty_id: Optional[Any] = None
    department_id: Optional[Any] = None
    first_name: Optional[Any] = None
    last_name: Optional[Any] = None
    title: Optional[Any] = None
    email: Optional[Any] = None
    profile_url: Optional[Any] = None


class ResearchInterestRowDTO(BaseModel):
    # always a fresh row: no id is carried for interests
    model_config = ConfigDict(extra="ignore")

    name: Any


# ============================================================
# Bundle: one sub-object per destination table
# ============================================================
class RelationalPayloadDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    university: UniversityRowDTO = Field(default_factory=UniversityRowDTO)
    department: DepartmentRowDTO = Field(default_factory=DepartmentRowDTO)
    faculty: FacultyRowDTO = Field(default_factory=FacultyRowDTO)
    research_interests: List[ResearchInterestRowDTO] = Field(default_factory=list)
    publications: List[PublicationRowDTO] = Field(default_factory=list)

    @property
    def is_insert(self) -> bool:
        """True when no faculty key was carried over, i.e. the row is new."""
        return self.faculty.faculty_id is None

    def to_rows(self) -> Dict[str, Any]:
        """
        Plain dicts keyed by destination table.

        None ids are kept so callers can tell the insert path (None) from the
        update path (an existing key).
        """
        return {
            "university": self.university.model_dump(),
            "department": self.department.model_dump(),
            "faculty": self.faculty.model_dump(),
            "research_interests": [x.model_dump() for x in self.research_interests],
            "publications": [x.model_dump() for x in self.publications],
        }
