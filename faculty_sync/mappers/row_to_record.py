from __future__ import annotations

from faculty_sync.db.models import Faculty
from faculty_sync.dto.faculty_dto import RelationalRecordDTO
from faculty_sync.dto.publication_dto import PublicationDTO


def relational_record_from_faculty(fac: Faculty) -> RelationalRecordDTO:
    """
    Flattens a Faculty row with its department, university, interests and
    publications into one relational record. Relationships must already be
    loaded (or the instance transient); nothing is queried here.
    """
    dept = fac.department
    uni = dept.university if dept is not None else None

    # FK columns may be unset on transient rows; fall back to the related objects
    department_id = fac.department_id
    if department_id is None and dept is not None:
        department_id = dept.department_id

    university_id = getattr(dept, "university_id", None)
    if university_id is None and uni is not None:
        university_id = uni.university_id

    return RelationalRecordDTO(
        faculty_id=fac.faculty_id,
        department_id=department_id,
        university_id=university_id,
        first_name=fac.first_name,
        last_name=fac.last_name,
        title=fac.title,
        email=fac.email,
        profile_url=fac.profile_url,
        university_name=getattr(uni, "name", None),
        department_name=getattr(dept, "name", None),
        research_interests=[ri.name for ri in fac.research_interests],
        publications=[
            PublicationDTO(
                title=p.title,
                venue=p.venue,
                year=p.year,
                doi=p.doi,
                url=p.url,
                is_primary_author=p.is_primary_author,
            )
            for p in fac.publications
        ],
        created_at=fac.created_at,
        updated_at=fac.updated_at,
    )
