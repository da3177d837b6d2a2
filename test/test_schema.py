import json

from faculty_sync.dto import FacultyDocumentDTO
from faculty_sync.schema import (
    FACULTY_VALIDATOR,
    INDEXES,
    UNIVERSITIES_VALIDATOR,
    apply_schema,
    describe_schema,
    sample_faculty_document,
)


class FakeCollection:
    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    def create_index(self, keys, **opts):
        self.calls.append(("create_index", self.name, keys, opts))
        return opts.get("name") or "_".join(f"{k}_{d}" for k, d in keys)


class FakeDatabase:
    """Records the pymongo calls apply_schema makes."""

    def __init__(self):
        self.calls = []

    def create_collection(self, name, **kwargs):
        self.calls.append(("create_collection", name, kwargs))

    def __getitem__(self, name):
        return FakeCollection(name, self.calls)


def _index_calls(db):
    return [c for c in db.calls if c[0] == "create_index"]


def test_apply_schema_creates_collections_then_indexes():
    db = FakeDatabase()
    names = apply_schema(db)

    assert db.calls[0] == ("create_collection", "universities", {"validator": UNIVERSITIES_VALIDATOR})
    assert db.calls[1] == ("create_collection", "faculty", {"validator": FACULTY_VALIDATOR})
    assert len(_index_calls(db)) == 8
    assert len(names) == 8
    assert names[-1] == "faculty_text_search"


def test_index_options():
    db = FakeDatabase()
    apply_schema(db)
    by_keys = {(c[1], tuple(k for k, _ in c[2])): c[3] for c in _index_calls(db)}

    assert by_keys[("universities", ("name",))] == {"unique": True}
    assert by_keys[("universities", ("departments.name",))] == {}
    assert by_keys[("faculty", ("last_name", "first_name"))] == {}
    assert by_keys[("faculty", ("email",))] == {"unique": True, "sparse": True}
    assert ("faculty", ("university.name", "department.name")) in by_keys
    assert ("faculty", ("research_interests",)) in by_keys
    assert ("faculty", ("publications.year",)) in by_keys


def test_text_index_weights():
    text = [s for s in INDEXES if s.name == "faculty_text_search"]
    assert len(text) == 1
    spec = text[0]

    assert all(direction == "text" for _, direction in spec.keys)
    assert spec.options()["weights"] == {
        "first_name": 5,
        "last_name": 10,
        "publications.title": 1,
        "research_interests": 3,
    }


def test_validators_required_fields():
    assert UNIVERSITIES_VALIDATOR["$jsonSchema"]["required"] == ["name"]
    faculty = FACULTY_VALIDATOR["$jsonSchema"]
    assert faculty["required"] == ["first_name", "last_name", "university", "department"]
    pub = faculty["properties"]["publications"]["items"]["properties"]
    assert pub["year"]["bsonType"] == "int"
    assert pub["is_primary_author"]["bsonType"] == "bool"


def test_sample_document_is_fresh_and_parses():
    a = sample_faculty_document()
    a["publications"].clear()
    b = sample_faculty_document()
    assert len(b["publications"]) == 2

    doc = FacultyDocumentDTO.model_validate(b)
    assert doc.sql_ids is None
    assert doc.courses[0]["code"] == "CS231"
    assert doc.research_projects[0]["funding"] == "NSF Grant #12345"


def test_sample_document_has_every_required_field():
    sample = sample_faculty_document()
    for field in FACULTY_VALIDATOR["$jsonSchema"]["required"]:
        assert field in sample
    assert sample["university"]["name"]
    assert sample["department"]["name"]


def test_describe_schema_is_json_ready():
    desc = describe_schema()
    assert desc["database"] == "faculty_db"
    assert set(desc["collections"]) == {"universities", "faculty"}
    assert len(desc["indexes"]) == 8
    json.dumps(desc)


def test_sample_university_id_is_objectid_hex():
    uid = sample_faculty_document()["university"]["university_id"]
    declared = FACULTY_VALIDATOR["$jsonSchema"]["properties"]["university"]["properties"]["university_id"]

    assert declared["bsonType"] == "objectId"
    # 24 hex chars, accepted by bson.ObjectId(uid)
    assert len(uid) == 24
    int(uid, 16)
