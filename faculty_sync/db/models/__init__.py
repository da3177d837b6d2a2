# faculty_sync/db/models/__init__.py
from .university import University, Department
from .faculty import Faculty, FacultyResearchInterest, FacultyPublication

__all__ = [
    "University",
    "Department",
    "Faculty",
    "FacultyResearchInterest",
    "FacultyPublication",
]
