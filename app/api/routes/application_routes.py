"""
Application Routes

POST /apply - Submit a student's application for a course
"""

from typing import List, Optional, Tuple
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.db.tables import SUBJECT_SLOTS
from app.core.errors import database_errors
from app.core.logging import get_logger
from app.utils.validation import require_fields
from app.schemas.schemas import ApplicationCreate, ApplicationCreatedResponse, GradeEntry

router = APIRouter(tags=["Applications"])
logger = get_logger("routes.applications")

SUBJECT_COLUMNS = [
    column
    for n in range(1, SUBJECT_SLOTS + 1)
    for column in (f"subject{n}", f"grade{n}")
]


def spread_grades(grades: Optional[List[GradeEntry]]) -> Tuple[List[str], List[str]]:
    """
    Lay grades out over the fixed subject/grade slots.

    Slot N holds the Nth entry; unused slots are '' and entries past the last
    slot are dropped.
    """
    subjects = [""] * SUBJECT_SLOTS
    values = [""] * SUBJECT_SLOTS
    for index, entry in enumerate((grades or [])[:SUBJECT_SLOTS]):
        subjects[index] = entry.subject or ""
        values[index] = entry.grade or ""
    return subjects, values


@router.post("/apply", response_model=ApplicationCreatedResponse, status_code=201)
def submit_application(data: ApplicationCreate, db: Session = Depends(get_db)):
    """Store an application together with up to eight subject/grade pairs."""
    require_fields(
        "All fields are required.",
        data.student_name, data.phone_number, data.student_id, data.university,
        data.course_id, data.faculty, data.major_subject,
    )

    subjects, values = spread_grades(data.grades)
    params = {
        "student_name": data.student_name,
        "phone_number": data.phone_number,
        "student_id": data.student_id,
        "university": data.university,
        "course_id": data.course_id,
        "faculty": data.faculty,
        "major_subject": data.major_subject,
    }
    for n in range(SUBJECT_SLOTS):
        params[f"subject{n + 1}"] = subjects[n]
        params[f"grade{n + 1}"] = values[n]

    with database_errors("Database error during application submission.", db):
        result = db.execute(
            text(f"""
                INSERT INTO applications (
                    student_name, phone_number, student_id, university, course_id, faculty, major_subject,
                    {", ".join(SUBJECT_COLUMNS)}
                )
                VALUES (
                    :student_name, :phone_number, :student_id, :university, :course_id, :faculty, :major_subject,
                    {", ".join(":" + column for column in SUBJECT_COLUMNS)}
                )
                RETURNING id
            """),
            params
        )
        application_id = result.scalar()
        db.commit()

    logger.info("Application %s submitted for student %s", application_id, data.student_id)
    return ApplicationCreatedResponse(
        message="Application submitted successfully",
        application_id=application_id
    )
