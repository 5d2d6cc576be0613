"""
Institution Routes

GET /institutions - List all institutions
POST /institutions - Add institution (multipart, logo required)
DELETE /institutions/{institution_id} - Delete institution with its faculties and courses
GET /university - Institutions without logos
GET /api/institutions - Institution counts grouped by name
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.db.database import get_db, fetch_all
from app.core.errors import DatabaseError, NotFoundError, ValidationError, database_errors
from app.core.logging import get_logger
from app.utils.file_upload import discard_on_error, has_file, save_upload, validate_image
from app.utils.validation import parse_row_id, require_fields
from app.schemas.schemas import (
    InstitutionCreatedResponse, InstitutionResponse, InstitutionSummaryResponse,
    MessageResponse, UniversityResponse
)

router = APIRouter(tags=["Institutions"])
logger = get_logger("routes.institutions")

MISSING_FIELDS = "Please provide all required fields and a logo."


@router.get("/institutions", response_model=List[InstitutionResponse])
def list_institutions(db: Session = Depends(get_db)):
    with database_errors("Database error while fetching institutions.", db):
        return fetch_all(db, "SELECT * FROM institutions ORDER BY id")


@router.post("/institutions", response_model=InstitutionCreatedResponse, status_code=201)
def create_institution(
    name: Optional[str] = Form(None),
    number_of_students: Optional[int] = Form(None),
    number_of_departments: Optional[int] = Form(None),
    number_of_courses: Optional[int] = Form(None),
    logo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    """Add an institution. Returns the stored row including its new id."""
    require_fields(MISSING_FIELDS, name, number_of_students, number_of_departments, number_of_courses)
    if not has_file(logo):
        raise ValidationError(MISSING_FIELDS)
    validate_image(logo)

    logo_path = save_upload(logo)

    with discard_on_error(logo_path):
        with database_errors("Database error during adding institution.", db):
            result = db.execute(
                text("""
                    INSERT INTO institutions (name, number_of_students, number_of_departments, number_of_courses, logo)
                    VALUES (:name, :students, :departments, :courses, :logo)
                    RETURNING id
                """),
                {
                    "name": name, "students": number_of_students,
                    "departments": number_of_departments, "courses": number_of_courses,
                    "logo": logo_path
                }
            )
            institution_id = result.scalar()
            db.commit()

        if institution_id is None:
            raise DatabaseError("Failed to add institution.")

    logger.info("Institution %s added with id %s", name, institution_id)
    return InstitutionCreatedResponse(
        message="Institution added successfully.",
        institution=InstitutionResponse(
            id=institution_id, name=name, number_of_students=number_of_students,
            number_of_departments=number_of_departments, number_of_courses=number_of_courses,
            logo=logo_path
        )
    )


@router.get("/university", response_model=List[UniversityResponse])
def list_universities(db: Session = Depends(get_db)):
    with database_errors("Database error while fetching universities.", db):
        return fetch_all(db, """
            SELECT id, name, number_of_students, number_of_departments, number_of_courses
            FROM institutions ORDER BY id
        """)


@router.get("/api/institutions", response_model=List[InstitutionSummaryResponse])
def institution_summary(db: Session = Depends(get_db)):
    """How many institutions share each name."""
    with database_errors("Database error while summarising institutions.", db):
        return fetch_all(db, """
            SELECT name, COUNT(*) AS count FROM institutions
            GROUP BY name ORDER BY name
        """)


@router.delete("/institutions/{institution_id}", response_model=MessageResponse)
def delete_institution(institution_id: str, db: Session = Depends(get_db)):
    """
    Delete an institution.

    Its courses and faculties go in the same transaction so nothing is left
    pointing at a missing institution.
    """
    row_id = parse_row_id(institution_id)
    if row_id is None:
        raise NotFoundError("Institution not found.")

    with database_errors("Database error during deleting institution.", db):
        params = {"id": row_id}
        db.execute(
            text("""
                DELETE FROM courses
                WHERE institution_id = :id
                   OR faculty_id IN (SELECT id FROM faculties WHERE institution_id = :id)
            """),
            params
        )
        db.execute(text("DELETE FROM faculties WHERE institution_id = :id"), params)
        result = db.execute(text("DELETE FROM institutions WHERE id = :id"), params)

        if result.rowcount == 0:
            db.rollback()
            raise NotFoundError("Institution not found.")
        db.commit()

    logger.info("Institution %s deleted", institution_id)
    return MessageResponse(message="Institution deleted successfully.")
