from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict


def sample_faculty_document() -> Dict[str, Any]:
    """
    Illustrative faculty document matching FACULTY_VALIDATOR.
    Built fresh on every call; callers may mutate it freely.

    university.university_id is the hex string of an ObjectId so the module
    needs no bson import. The validator declares bsonType objectId, so wrap
    it in bson.ObjectId(...) before inserting the document.
    """
    now = datetime.now(timezone.utc)
    return {
        "first_name": "Jane",
        "last_name": "Smith",
        "title": "Associate Professor",
        "email": "jane.smith@stanford.edu",
        "profile_url": "https://cs.stanford.edu/people/jsmith",
        "university": {
            "name": "Stanford University",
            # hex of an ObjectId; not insertable as-is
            "university_id": "5f8f8f8f8f8f8f8f8f8f8f8f",
        },
        "department": {
            "name": "Computer Science",
        },
        "research_interests": [
            "Machine Learning",
            "Computer Vision",
            "Artificial Intelligence",
        ],
        "publications": [
            {
                "title": "Deep Learning for Computer Vision",
                "venue": "Conference on Computer Vision and Pattern Recognition",
                "year": 2023,
                "doi": "10.1145/12345.67890",
                "url": "https://doi.org/10.1145/12345.67890",
                "authors": ["Jane Smith", "John Doe", "Alice Johnson"],
                "is_primary_author": True,
            },
            {
                "title": "Advances in Neural Networks",
                "venue": "Journal of Machine Learning Research",
                "year": 2022,
                "doi": "10.1145/98765.43210",
                "url": "https://doi.org/10.1145/98765.43210",
                "authors": ["Bob Brown", "Jane Smith", "Carol White"],
                "is_primary_author": False,
            },
        ],
        "courses": [
            {"code": "CS231", "name": "Deep Learning for Computer Vision", "term": "Spring 2023"},
            {"code": "CS229", "name": "Machine Learning", "term": "Fall 2022"},
        ],
        "research_projects": [
            {
                "name": "Neural Scene Representation",
                "description": "Research on representing 3D scenes with neural networks",
                "funding": "NSF Grant #12345",
                "start_date": datetime(2022, 1, 1, tzinfo=timezone.utc),
                "end_date": datetime(2024, 12, 31, tzinfo=timezone.utc),
            }
        ],
        "awards": [
            {
                "name": "Outstanding Faculty Award",
                "organization": "Computer Science Department",
                "year": 2022,
            }
        ],
        "raw_data": {},
        "created_at": now,
        "updated_at": now,
    }
