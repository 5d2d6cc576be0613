"""
Admission Routes

POST /publish-admissions - Turn a batch of applications into admissions
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.db.database import get_db, fetch_one
from app.core.errors import ValidationError, database_errors
from app.core.logging import get_logger
from app.utils.validation import parse_row_id
from app.schemas.schemas import MessageResponse, PublishAdmissionsRequest

router = APIRouter(tags=["Admissions"])
logger = get_logger("routes.admissions")

ADMITTED = "admitted"


@router.post("/publish-admissions", response_model=MessageResponse)
def publish_admissions(data: PublishAdmissionsRequest, db: Session = Depends(get_db)):
    """
    Admit every listed application.

    Runs as one transaction: either every admission of the batch is stored or
    none is. Unknown application ids are skipped, and so are applications whose
    student already holds an admission for that course.
    """
    application_ids = data.application_ids
    if not isinstance(application_ids, list) or not application_ids:
        raise ValidationError("No application IDs provided to process.")

    created, skipped = 0, 0
    with database_errors("Error processing admissions.", db):
        for raw_id in application_ids:
            application_id = parse_row_id(raw_id)
            application = application_id is not None and fetch_one(
                db,
                "SELECT student_id, course_id FROM applications WHERE id = :id",
                {"id": application_id}
            )
            if not application:
                skipped += 1
                continue

            existing = fetch_one(
                db,
                "SELECT id FROM admissions WHERE student_id = :student_id AND course_id = :course_id",
                application
            )
            if existing is not None:
                skipped += 1
                continue

            db.execute(
                text("""
                    INSERT INTO admissions (student_id, course_id, institution_id, faculty_id, status)
                    VALUES (:student_id, :course_id, NULL, NULL, :status)
                """),
                {**application, "status": ADMITTED}
            )
            created += 1

        db.commit()

    logger.info("Published %d admissions (%d skipped)", created, skipped)
    return MessageResponse(message="Admissions successfully published.")
