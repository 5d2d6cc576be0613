# tests/conftest.py
from __future__ import annotations

import os
import shutil
import tempfile

# =========================
# Env bootstrap (must run before the app is imported)
# =========================
UPLOAD_DIR = tempfile.mkdtemp(prefix="career-uploads-")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = UPLOAD_DIR
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.db.database import fetch_all, get_db_session, get_engine
from app.db.tables import metadata
from tests.helpers import png


@pytest.fixture(scope="session", autouse=True)
def _cleanup_upload_dir():
    yield
    shutil.rmtree(UPLOAD_DIR, ignore_errors=True)


@pytest.fixture()
def client():
    """Fresh schema and empty upload dir for every test."""
    engine = get_engine()
    metadata.drop_all(bind=engine)
    metadata.create_all(bind=engine)
    for name in os.listdir(UPLOAD_DIR):
        os.remove(os.path.join(UPLOAD_DIR, name))

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def query():
    """Run raw SQL against the test database and return dict rows."""
    def _query(sql: str, params: dict | None = None) -> list:
        with get_db_session() as db:
            return fetch_all(db, sql, params)
    return _query


@pytest.fixture()
def uploaded_files():
    def _list() -> list:
        return sorted(os.listdir(UPLOAD_DIR))
    return _list


@pytest.fixture()
def register_user(client):
    def _register(name="A", email="a@x.com", password="pw", user_type="student", picture=None):
        return client.post(
            "/register",
            data={"name": name, "email": email, "password": password, "user_type": user_type},
            files={"profilePicture": picture or png()},
        )
    return _register


@pytest.fixture()
def create_institution(client):
    def _create(name="Uni One", students=1000, departments=5, courses=20, logo=None):
        return client.post(
            "/institutions",
            data={
                "name": name,
                "number_of_students": str(students),
                "number_of_departments": str(departments),
                "number_of_courses": str(courses),
            },
            files={"logo": logo or png("logo.png")},
        )
    return _create


@pytest.fixture()
def submit_application(client):
    def _submit(**overrides):
        payload = {
            "student_name": "Jane Doe",
            "phone_number": "123456789",
            "student_id": "ST001",
            "university": "University X",
            "course_id": 1,
            "faculty": "Science",
            "major_subject": "Mathematics",
            "grades": [{"subject": "Math", "grade": "A"}, {"subject": "English", "grade": "B"}],
        }
        payload.update(overrides)
        return client.post("/apply", json=payload)
    return _submit
