import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from student_api.services.student import student as crud_student

STUDENTS_URL = "/api/students"


def _create(client, payload):
    r = client.post(STUDENTS_URL, json=payload)
    assert r.status_code == 200, r.json()
    return r


def _only_student(client):
    r = client.get(STUDENTS_URL)
    assert r.status_code == 200
    students = r.json()["students"]
    assert len(students) == 1
    return students[0]


def _boom(self):
    raise OperationalError("COMMIT", {}, Exception("database is locked"))


def test_list_empty_table_returns_404(client):
    r = client.get(STUDENTS_URL)
    assert r.status_code == 404
    assert r.json() == {"status": 404, "message": "No Records Found"}


def test_create_then_list_and_show(client, alice):
    r = _create(client, alice)
    assert r.json() == {"status": 200, "message": "Record has Created Successfully"}

    listed = _only_student(client)
    for field, value in alice.items():
        assert listed[field] == value

    r2 = client.get(f"{STUDENTS_URL}/{listed['id']}")
    assert r2.status_code == 200
    body = r2.json()
    assert body["status"] == 200
    assert body["student"]["name"] == "Alice"
    assert body["student"]["id"] == listed["id"]


def test_create_sets_created_at_only(client, alice):
    _create(client, alice)
    student = _only_student(client)
    assert student["created_at"] is not None
    assert student["updated_at"] is None


def test_list_keeps_creation_order(client, alice):
    _create(client, alice)
    _create(client, {**alice, "name": "Bob", "email": "b@x.com"})
    r = client.get(STUDENTS_URL)
    assert r.status_code == 200
    assert [s["name"] for s in r.json()["students"]] == ["Alice", "Bob"]


def test_show_missing_returns_404(client):
    r = client.get(f"{STUDENTS_URL}/999")
    assert r.status_code == 404
    assert r.json() == {"status": 404, "message": "No Such Record Found!"}


def test_edit_matches_show(client, alice):
    _create(client, alice)
    student_id = _only_student(client)["id"]

    show = client.get(f"{STUDENTS_URL}/{student_id}")
    edit = client.get(f"{STUDENTS_URL}/{student_id}/edit")
    assert edit.status_code == 200
    assert edit.json() == show.json()


def test_edit_missing_returns_404(client):
    r = client.get(f"{STUDENTS_URL}/42/edit")
    assert r.status_code == 404
    assert r.json()["message"] == "No Such Record Found!"


def test_update_replaces_fields_and_stamps_updated_at(client, alice):
    _create(client, alice)
    before = _only_student(client)

    changes = {"name": "Alicia", "course": "Math", "email": "alicia@y.org", "phone": "0987654321"}
    r = client.put(f"{STUDENTS_URL}/{before['id']}/edit", json=changes)
    assert r.status_code == 200
    assert r.json() == {"status": 200, "message": "Record has Updated Successfully"}

    after = client.get(f"{STUDENTS_URL}/{before['id']}").json()["student"]
    for field, value in changes.items():
        assert after[field] == value
    assert after["updated_at"] is not None
    assert after["created_at"] == before["created_at"]


def test_update_missing_returns_404(client, alice):
    r = client.put(f"{STUDENTS_URL}/7/edit", json=alice)
    assert r.status_code == 404
    assert r.json() == {"status": 404, "message": "No Such Record Found!"}


def test_update_validates_before_lookup(client):
    r = client.put(f"{STUDENTS_URL}/7/edit", json={"name": "X"})
    assert r.status_code == 422
    assert set(r.json()["errors"]) == {"course", "email", "phone"}


def test_create_persistence_failure_returns_500(client, alice, monkeypatch):
    monkeypatch.setattr(Session, "commit", _boom)
    r = client.post(STUDENTS_URL, json=alice)
    assert r.status_code == 500
    assert r.json() == {"status": 500, "message": "Something Went Wrong"}

    monkeypatch.undo()
    assert client.get(STUDENTS_URL).status_code == 404


def test_update_persistence_failure_returns_500(client, alice, monkeypatch):
    _create(client, alice)
    student_id = _only_student(client)["id"]

    monkeypatch.setattr(Session, "commit", _boom)
    r = client.put(f"{STUDENTS_URL}/{student_id}/edit", json={**alice, "name": "Changed"})
    assert r.status_code == 500
    assert r.json()["message"] == "Something Went Wrong"

    monkeypatch.undo()
    assert _only_student(client)["name"] == "Alice"


def test_unhandled_error_uses_envelope(alice, monkeypatch):
    from fastapi.testclient import TestClient
    from student_api.main import app

    def broken(db):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(crud_student, "get_students", broken)
    client = TestClient(app, raise_server_exceptions=False)
    r = client.get(STUDENTS_URL)
    assert r.status_code == 500
    assert r.json() == {"status": 500, "message": "Something Went Wrong"}


def test_unknown_route_and_method_use_envelope(client):
    r = client.get("/api/teachers")
    assert r.status_code == 404
    assert r.json() == {"status": 404, "message": "Not Found"}

    r2 = client.delete(f"{STUDENTS_URL}/1")
    assert r2.status_code == 405
    assert r2.json()["status"] == 405


def test_service_lookups_return_none_for_missing(db, alice):
    from student_api.schemas.student import StudentUpdate

    assert crud_student.get_student(db, 123) is None
    assert crud_student.update_student(db, 123, StudentUpdate(**alice)) is None
    assert crud_student.get_students(db) == []


@pytest.mark.parametrize("student_id", [0, 2**31, 2**63])
def test_ids_outside_the_key_range_are_not_found(client, alice, student_id):
    for url in (f"{STUDENTS_URL}/{student_id}", f"{STUDENTS_URL}/{student_id}/edit"):
        r = client.get(url)
        assert r.status_code == 404
        assert r.json() == {"status": 404, "message": "No Such Record Found!"}

    r = client.put(f"{STUDENTS_URL}/{student_id}/edit", json=alice)
    assert r.status_code == 404
    assert r.json()["message"] == "No Such Record Found!"
