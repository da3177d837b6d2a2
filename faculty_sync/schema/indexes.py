from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from faculty_sync.config import FACULTY_COLLECTION, UNIVERSITIES_COLLECTION

# Same values as pymongo.ASCENDING / pymongo.TEXT
ASCENDING = 1
TEXT = "text"


@dataclass(frozen=True)
class IndexSpec:
    collection: str
    keys: Tuple[Tuple[str, Any], ...]
    unique: bool = False
    sparse: bool = False
    weights: Optional[Tuple[Tuple[str, int], ...]] = None
    name: Optional[str] = None

    def options(self) -> Dict[str, Any]:
        """kwargs for Collection.create_index(); unset options are left out."""
        opts: Dict[str, Any] = {}
        if self.unique:
            opts["unique"] = True
        if self.sparse:
            opts["sparse"] = True
        if self.weights:
            opts["weights"] = dict(self.weights)
        if self.name:
            opts["name"] = self.name
        return opts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "collection": self.collection,
            "keys": [list(k) for k in self.keys],
            **self.options(),
        }


INDEXES: List[IndexSpec] = [
    # universities
    IndexSpec(UNIVERSITIES_COLLECTION, (("name", ASCENDING),), unique=True),
    IndexSpec(UNIVERSITIES_COLLECTION, (("departments.name", ASCENDING),)),

    # faculty
    IndexSpec(FACULTY_COLLECTION, (("last_name", ASCENDING), ("first_name", ASCENDING))),
    IndexSpec(FACULTY_COLLECTION, (("email", ASCENDING),), unique=True, sparse=True),
    IndexSpec(FACULTY_COLLECTION, (("university.name", ASCENDING), ("department.name", ASCENDING))),
    IndexSpec(FACULTY_COLLECTION, (("research_interests", ASCENDING),)),
    IndexSpec(FACULTY_COLLECTION, (("publications.year", ASCENDING),)),

    # text search
    IndexSpec(
        FACULTY_COLLECTION,
        (
            ("first_name", TEXT),
            ("last_name", TEXT),
            ("publications.title", TEXT),
            ("research_interests", TEXT),
        ),
        weights=(
            ("last_name", 10),
            ("first_name", 5),
            ("research_interests", 3),
            ("publications.title", 1),
        ),
        name="faculty_text_search",
    ),
]
