from .publication_dto import PublicationDTO, PublicationRowDTO
from .faculty_dto import (
    RelationalRecordDTO,
    SqlIdsDTO,
    UniversityRefDTO,
    DepartmentRefDTO,
    FacultyDocumentDTO,
)
from .payload_dto import (
    UniversityRowDTO,
    DepartmentRowDTO,
    FacultyRowDTO,
    ResearchInterestRowDTO,
    RelationalPayloadDTO,
)

__all__ = [
    "PublicationDTO",
    "PublicationRowDTO",
    "RelationalRecordDTO",
    "SqlIdsDTO",
    "UniversityRefDTO",
    "DepartmentRefDTO",
    "FacultyDocumentDTO",
    "UniversityRowDTO",
    "DepartmentRowDTO",
    "FacultyRowDTO",
    "ResearchInterestRowDTO",
    "RelationalPayloadDTO",
]
