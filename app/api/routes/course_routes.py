"""
Course Routes

POST /courses - Add course under a faculty and institution
GET /courses - List courses with their university name and entry requirements
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.db.database import get_db, fetch_all
from app.core.errors import database_errors
from app.utils.validation import require_fields
from app.schemas.schemas import CourseCreate, CourseListItem, MessageResponse

router = APIRouter(prefix="/courses", tags=["Courses"])

# Same requirements text for every course until courses carry their own
DEFAULT_REQUIREMENTS = "High School Diploma, Pass in relevant subjects"


@router.post("", response_model=MessageResponse, status_code=201)
def create_course(data: CourseCreate, db: Session = Depends(get_db)):
    require_fields("Please provide name, faculty, and institution.", data.name, data.faculty, data.institution)

    with database_errors("Database error during adding course.", db):
        db.execute(
            text("""
                INSERT INTO courses (name, faculty_id, institution_id)
                VALUES (:name, :faculty_id, :institution_id)
            """),
            {"name": data.name, "faculty_id": data.faculty, "institution_id": data.institution}
        )
        db.commit()

    return MessageResponse(message="Course added successfully.")


@router.get("", response_model=List[CourseListItem])
def list_courses(db: Session = Depends(get_db)):
    with database_errors("Database error while fetching courses.", db):
        return fetch_all(db, """
            SELECT c.id, c.name, i.name AS university, :requirements AS requirements
            FROM courses c
            JOIN institutions i ON c.institution_id = i.id
            ORDER BY c.id
        """, {"requirements": DEFAULT_REQUIREMENTS})
