# $jsonSchema validators for the document store collections.
from __future__ import annotations

from typing import Any, Dict


def _string(description: str) -> Dict[str, Any]:
    return {"bsonType": "string", "description": description}


def _date(description: str) -> Dict[str, Any]:
    return {"bsonType": "date", "description": description}


def _object_array(description: str) -> Dict[str, Any]:
    return {
        "bsonType": "array",
        "description": description,
        "items": {"bsonType": "object"},
    }


# ───────────────────────────────────────────────
# universities
# ───────────────────────────────────────────────
UNIVERSITIES_VALIDATOR: Dict[str, Any] = {
    "$jsonSchema": {
        "bsonType": "object",
        "required": ["name"],
        "properties": {
            "name": _string("Name of the university"),
            "location": _string("University location"),
            "website": _string("University website URL"),
            "departments": {
                "bsonType": "array",
                "description": "List of departments within the university",
                "items": {
                    "bsonType": "object",
                    "required": ["name"],
                    "properties": {
                        "name": _string("Name of the department"),
                        "website": _string("Department website URL"),
                    },
                },
            },
            "created_at": _date("Timestamp of when the document was created"),
            "updated_at": _date("Timestamp of the last update to the document"),
        },
    }
}


# ───────────────────────────────────────────────
# faculty
# ───────────────────────────────────────────────
PUBLICATION_SCHEMA: Dict[str, Any] = {
    "bsonType": "object",
    "properties": {
        "title": _string("Title of the publication"),
        "venue": _string("Publication venue (journal, conference, etc.)"),
        "year": {"bsonType": "int", "description": "Publication year"},
        "doi": _string("Digital Object Identifier"),
        "url": _string("URL to the publication"),
        "authors": {
            "bsonType": "array",
            "description": "List of authors",
            "items": {"bsonType": "string"},
        },
        "is_primary_author": {
            "bsonType": "bool",
            "description": "Whether the faculty member is the primary author",
        },
    },
}

FACULTY_VALIDATOR: Dict[str, Any] = {
    "$jsonSchema": {
        "bsonType": "object",
        "required": ["first_name", "last_name", "university", "department"],
        "properties": {
            "first_name": _string("Faculty member's first name"),
            "last_name": _string("Faculty member's last name"),
            "title": _string("Faculty member's title or position"),
            "email": _string("Faculty member's email address"),
            "profile_url": _string("URL to faculty member's profile page"),
            "university": {
                "bsonType": "object",
                "required": ["name"],
                "description": "University information",
                "properties": {
                    "name": _string("Name of the university"),
                    "university_id": {
                        "bsonType": "objectId",
                        "description": "Reference to university document",
                    },
                },
            },
            "department": {
                "bsonType": "object",
                "required": ["name"],
                "description": "Department information",
                "properties": {
                    "name": _string("Name of the department"),
                },
            },
            "research_interests": {
                "bsonType": "array",
                "description": "List of research interests",
                "items": {"bsonType": "string"},
            },
            "publications": {
                "bsonType": "array",
                "description": "List of publications",
                "items": PUBLICATION_SCHEMA,
            },
            # unstructured, not mapped to SQL
            "courses": _object_array("Courses taught by the faculty member"),
            "research_projects": _object_array("Research projects"),
            "awards": _object_array("Awards and recognitions"),
            "raw_data": {
                "bsonType": "object",
                "description": "Original scraped data in its raw form",
            },
            "created_at": _date("Timestamp of when the document was created"),
            "updated_at": _date("Timestamp of the last update to the document"),
        },
    }
}
