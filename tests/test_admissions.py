from __future__ import annotations

from unittest import mock

from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from app.db.database import get_db_session


def test_publish_skips_unknown_ids(client, submit_application, query):
    submit_application()

    r = client.post("/publish-admissions", json={"application_ids": [1, 999]})
    assert r.status_code == 200
    assert r.json()["message"] == "Admissions successfully published."

    admissions = query("SELECT * FROM admissions")
    assert len(admissions) == 1
    admission = admissions[0]
    assert admission["student_id"] == "ST001"
    assert admission["course_id"] == 1
    assert admission["institution_id"] is None
    assert admission["faculty_id"] is None
    assert admission["status"] == "admitted"


def test_publish_requires_a_list(client):
    for payload in ({}, {"application_ids": []}, {"application_ids": "1,2"}, {"application_ids": 3}):
        r = client.post("/publish-admissions", json=payload)
        assert r.status_code == 400
        assert r.json() == {"error": "No application IDs provided to process."}


def test_publish_ignores_ids_that_are_not_numbers(client, submit_application, query):
    submit_application()

    r = client.post("/publish-admissions", json={"application_ids": ["abc", "1", None]})
    assert r.status_code == 200
    assert len(query("SELECT id FROM admissions")) == 1


def test_republishing_does_not_duplicate(client, submit_application, query):
    submit_application()
    submit_application(student_id="ST002")

    assert client.post("/publish-admissions", json={"application_ids": [1, 2, 1]}).status_code == 200
    assert client.post("/publish-admissions", json={"application_ids": [1, 2]}).status_code == 200

    rows = query("SELECT student_id FROM admissions ORDER BY student_id")
    assert [row["student_id"] for row in rows] == ["ST001", "ST002"]


def test_failed_publish_rolls_back_whole_batch(client, submit_application, query):
    submit_application()
    submit_application(student_id="ST002")

    import app.api.routes.admission_routes as admission_routes

    real_fetch_one = admission_routes.fetch_one
    calls = {"n": 0}

    def flaky_fetch_one(db, sql, params=None):
        # first application goes through, the lookup for the second blows up
        if "FROM applications" in sql:
            calls["n"] += 1
            if calls["n"] == 2:
                raise OperationalError(sql, params, Exception("connection lost"))
        return real_fetch_one(db, sql, params)

    with mock.patch.object(admission_routes, "fetch_one", flaky_fetch_one):
        r = client.post("/publish-admissions", json={"application_ids": [1, 2]})

    assert r.status_code == 500
    assert r.json() == {"error": "Error processing admissions."}
    assert query("SELECT id FROM admissions") == []


def test_publish_ignores_ids_outside_key_range(client, submit_application, query):
    submit_application()

    r = client.post("/publish-admissions", json={"application_ids": [2 ** 64, 0, -1, True, 1]})
    assert r.status_code == 200
    assert len(query("SELECT id FROM admissions")) == 1


def test_concurrent_duplicate_admission_rolls_back_batch(client, submit_application, query):
    submit_application()
    submit_application(student_id="ST002")
    # another request admitted ST001 after this one checked for existing admissions
    with get_db_session() as db:
        db.execute(
            text("INSERT INTO admissions (student_id, course_id, status) VALUES ('ST001', 1, 'admitted')")
        )

    import app.api.routes.admission_routes as admission_routes

    real_fetch_one = admission_routes.fetch_one

    def stale_fetch_one(db, sql, params=None):
        if "FROM admissions" in sql:
            return None
        return real_fetch_one(db, sql, params)

    with mock.patch.object(admission_routes, "fetch_one", stale_fetch_one):
        r = client.post("/publish-admissions", json={"application_ids": [2, 1]})

    assert r.status_code == 500
    assert r.json() == {"error": "Error processing admissions."}
    rows = query("SELECT student_id FROM admissions")
    assert [row["student_id"] for row in rows] == ["ST001"]
