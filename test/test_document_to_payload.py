from faculty_sync.dto import FacultyDocumentDTO, RelationalPayloadDTO
from faculty_sync.mappers import mongo_to_sql, sql_to_mongo
from faculty_sync.schema import sample_faculty_document

PUB_ROW_FIELDS = ("title", "venue", "year", "doi", "url", "is_primary_author")


def make_document(**overrides):
    doc = sample_faculty_document()
    doc["_sql_ids"] = {"faculty_id": 11, "department_id": 22, "university_id": 33}
    doc["university"]["location"] = "Stanford, CA"
    doc["university"]["website"] = "https://www.stanford.edu"
    doc["department"]["website"] = "https://cs.stanford.edu"
    doc.update(overrides)
    return doc


def test_ids_come_from_sql_ids():
    payload = mongo_to_sql(make_document())

    assert payload.university.university_id == 33
    assert payload.department.department_id == 22
    assert payload.department.university_id == 33
    assert payload.faculty.faculty_id == 11
    assert payload.faculty.department_id == 22
    assert payload.is_insert is False


def test_missing_sql_ids_means_insert_path():
    doc = make_document()
    del doc["_sql_ids"]
    payload = mongo_to_sql(doc)

    assert payload.faculty.faculty_id is None
    assert payload.faculty.department_id is None
    assert payload.department.department_id is None
    assert payload.university.university_id is None
    assert payload.is_insert is True


def test_partial_sql_ids_leave_only_missing_ids_empty():
    payload = mongo_to_sql(make_document(_sql_ids={"department_id": 5}))
    assert payload.department.department_id == 5
    assert payload.faculty.department_id == 5
    assert payload.faculty.faculty_id is None
    assert payload.university.university_id is None


def test_university_id_inside_university_block_is_not_used():
    doc = make_document()
    del doc["_sql_ids"]
    doc["university"]["university_id"] = 99
    assert mongo_to_sql(doc).university.university_id is None


def test_table_fields_are_copied():
    payload = mongo_to_sql(make_document())

    assert payload.university.name == "Stanford University"
    assert payload.university.location == "Stanford, CA"
    assert payload.university.website == "https://www.stanford.edu"
    assert payload.department.name == "Computer Science"
    assert payload.department.website == "https://cs.stanford.edu"
    assert payload.faculty.first_name == "Jane"
    assert payload.faculty.last_name == "Smith"
    assert payload.faculty.title == "Associate Professor"
    assert payload.faculty.email == "jane.smith@stanford.edu"
    assert payload.faculty.profile_url == "https://cs.stanford.edu/people/jsmith"


def test_research_interests_become_name_rows():
    payload = mongo_to_sql(make_document())
    assert [r.model_dump() for r in payload.research_interests] == [
        {"name": "Machine Learning"},
        {"name": "Computer Vision"},
        {"name": "Artificial Intelligence"},
    ]


def test_publications_keep_order_and_drop_authors():
    doc = make_document()
    payload = mongo_to_sql(doc)

    assert len(payload.publications) == len(doc["publications"])
    for src, row in zip(doc["publications"], payload.publications):
        dumped = row.model_dump()
        assert "authors" not in dumped
        assert dumped == {k: src[k] for k in PUB_ROW_FIELDS}


def test_missing_arrays_and_blocks_do_not_raise():
    payload = mongo_to_sql({"first_name": "Ada", "last_name": "Lovelace"})

    assert payload.research_interests == []
    assert payload.publications == []
    assert payload.university.name is None
    assert payload.department.name is None
    assert payload.faculty.first_name == "Ada"

    assert mongo_to_sql(None) == RelationalPayloadDTO()


def test_accepts_model_input_and_leaves_it_untouched():
    doc = FacultyDocumentDTO.model_validate(make_document())
    before = doc.model_dump()
    mongo_to_sql(doc)
    assert doc.model_dump() == before


def test_to_rows_groups_by_table():
    rows = mongo_to_sql(make_document()).to_rows()

    assert set(rows) == {"university", "department", "faculty", "research_interests", "publications"}
    assert rows["faculty"]["faculty_id"] == 11
    assert rows["research_interests"][0] == {"name": "Machine Learning"}
    assert rows["publications"][1]["is_primary_author"] is False


def test_round_trip_keeps_ids_but_not_interest_identity():
    row = {
        "faculty_id": 1,
        "department_id": 3,
        "university_id": 7,
        "first_name": "Jane",
        "university_name": "Stanford",
        "department_name": "CS",
        "research_interests": ["Robotics"],
    }
    payload = mongo_to_sql(sql_to_mongo(row))

    assert payload.faculty.faculty_id == 1
    assert payload.department.department_id == 3
    assert payload.university.university_id == 7
    assert payload.university.name == "Stanford"
    assert payload.department.name == "CS"
    # interests come back as fresh {name} rows
    assert [r.name for r in payload.research_interests] == ["Robotics"]


def test_publication_values_are_not_coerced():
    pubs = [
        {"title": "t", "year": "2023"},
        {"title": "u", "year": "2023 (in press)", "is_primary_author": "yes", "doi": 10},
    ]
    payload = mongo_to_sql({"publications": pubs})

    assert payload.publications[0].year == "2023"
    assert payload.publications[1].year == "2023 (in press)"
    assert payload.publications[1].is_primary_author == "yes"
    assert payload.publications[1].doi == 10


def test_string_sql_ids_pass_through():
    payload = mongo_to_sql({"_sql_ids": {"faculty_id": "fac-uuid-1", "university_id": "u7"}})

    assert payload.faculty.faculty_id == "fac-uuid-1"
    assert payload.university.university_id == "u7"
    assert payload.department.university_id == "u7"
    assert payload.department.department_id is None
