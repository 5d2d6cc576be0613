"""
Table definitions.

Queries are written as raw SQL in the route modules; these Table objects only
describe the schema so create_all() works on PostgreSQL, MySQL and SQLite alike.
"""

from sqlalchemy import (
    Column, ForeignKey, Integer, MetaData, String, Table, UniqueConstraint
)

metadata = MetaData()

SUBJECT_SLOTS = 8


users = Table(
    "users", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password", String(255), nullable=False),  # bcrypt hash
    Column("user_type", String(50), nullable=False),
    Column("profile_picture", String(500)),
    Column("phone", String(50)),
)

institutions = Table(
    "institutions", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("number_of_students", Integer, nullable=False),
    Column("number_of_departments", Integer, nullable=False),
    Column("number_of_courses", Integer, nullable=False),
    Column("logo", String(500)),
)

faculties = Table(
    "faculties", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("institution_id", Integer, ForeignKey("institutions.id"), nullable=False),
)

courses = Table(
    "courses", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("faculty_id", Integer, ForeignKey("faculties.id"), nullable=False),
    Column("institution_id", Integer, ForeignKey("institutions.id"), nullable=False),
)

applications = Table(
    "applications", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("student_name", String(255), nullable=False),
    Column("phone_number", String(50), nullable=False),
    Column("student_id", String(100), nullable=False),
    Column("university", String(255), nullable=False),
    Column("course_id", Integer, nullable=False),
    Column("faculty", String(255), nullable=False),
    Column("major_subject", String(255), nullable=False),
    # subjectN pairs with gradeN, unused slots hold ''
    *[
        column
        for n in range(1, SUBJECT_SLOTS + 1)
        for column in (
            Column(f"subject{n}", String(255), nullable=False, server_default=""),
            Column(f"grade{n}", String(50), nullable=False, server_default=""),
        )
    ],
)

admissions = Table(
    "admissions", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("student_id", String(100), nullable=False),
    Column("course_id", Integer, nullable=False),
    Column("institution_id", Integer),
    Column("faculty_id", Integer),
    Column("status", String(50), nullable=False, server_default="admitted"),
    UniqueConstraint("student_id", "course_id", name="uq_admissions_student_course"),
)
