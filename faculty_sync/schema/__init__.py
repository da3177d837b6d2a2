from .validators import UNIVERSITIES_VALIDATOR, FACULTY_VALIDATOR
from .indexes import IndexSpec, INDEXES
from .sample import sample_faculty_document
from .bootstrap import apply_schema, describe_schema

__all__ = [
    "UNIVERSITIES_VALIDATOR",
    "FACULTY_VALIDATOR",
    "IndexSpec",
    "INDEXES",
    "sample_faculty_document",
    "apply_schema",
    "describe_schema",
]
