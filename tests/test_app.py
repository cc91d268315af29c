from student_api.core.config import settings
from student_api.models.student import Student
from student_api.seed import SAMPLE_STUDENTS, seed_data


def test_root_health_check(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {
        "message": "Welcome to Student Records API",
        "docs": "/docs",
        "version": settings.APP_VERSION,
    }


def test_openapi_lists_student_routes(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert "/api/students" in paths
    assert set(paths["/api/students/{id}/edit"]) == {"get", "put"}


def test_seed_inserts_once(db, client):
    assert seed_data(db) == len(SAMPLE_STUDENTS)
    assert seed_data(db) == 0
    assert db.query(Student).count() == len(SAMPLE_STUDENTS)

    r = client.get("/api/students")
    assert r.status_code == 200
    assert len(r.json()["students"]) == len(SAMPLE_STUDENTS)


def test_startup_initializes_database(monkeypatch):
    from fastapi.testclient import TestClient
    from student_api import main

    calls = []
    monkeypatch.setattr(main, "init_db", lambda: calls.append("init_db"))
    with TestClient(main.app) as client:
        assert client.get("/").status_code == 200
    assert calls == ["init_db"]
