"""
Faculty Routes

POST /faculties - Add faculty to an institution
GET /faculties - List faculties
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.db.database import get_db, fetch_all
from app.core.errors import database_errors
from app.utils.validation import require_fields
from app.schemas.schemas import FacultyCreate, FacultyResponse, MessageResponse

router = APIRouter(prefix="/faculties", tags=["Faculties"])


@router.post("", response_model=MessageResponse, status_code=201)
def create_faculty(data: FacultyCreate, db: Session = Depends(get_db)):
    require_fields("Please provide both name and institution.", data.name, data.institution_id)

    with database_errors("Database error during adding faculty.", db):
        db.execute(
            text("INSERT INTO faculties (name, institution_id) VALUES (:name, :institution_id)"),
            {"name": data.name, "institution_id": data.institution_id}
        )
        db.commit()

    return MessageResponse(message="Faculty added successfully.")


@router.get("", response_model=List[FacultyResponse])
def list_faculties(db: Session = Depends(get_db)):
    with database_errors("Database error while fetching faculties.", db):
        return fetch_all(db, "SELECT id, name, institution_id FROM faculties ORDER BY id")
