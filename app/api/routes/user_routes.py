"""
User Routes

GET /users - List users (password hashes are never returned)
PUT /updateProfile/{user_id} - Update name, email, phone and optionally the picture
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.db.database import get_db, fetch_all
from app.core.errors import NotFoundError, database_errors
from app.utils.file_upload import discard_on_error, has_file, save_upload, validate_image
from app.utils.validation import parse_row_id, require_fields
from app.schemas.schemas import MessageResponse, UserResponse

router = APIRouter(tags=["Users"])


@router.get("/users", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    with database_errors("Database error while fetching users.", db):
        return fetch_all(
            db, "SELECT id, name, email, user_type, profile_picture, phone FROM users ORDER BY id"
        )


@router.put("/updateProfile/{user_id}", response_model=MessageResponse)
def update_profile(
    user_id: str,
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    profilePicture: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    """
    Update a user's profile.

    profile_picture is only touched when a new file comes with the request.
    """
    require_fields("Please provide name, email, and phone.", name, email, phone)
    row_id = parse_row_id(user_id)
    if row_id is None:
        raise NotFoundError("User not found.")

    updates = ["name = :name", "email = :email", "phone = :phone"]
    params = {"id": row_id, "name": name, "email": email, "phone": phone}

    picture_path = None
    if has_file(profilePicture):
        validate_image(profilePicture)
        picture_path = save_upload(profilePicture)
        updates.append("profile_picture = :profile_picture")
        params["profile_picture"] = picture_path

    with discard_on_error(picture_path), database_errors(
        "Database error while updating profile.", db, conflict_message="Email already registered."
    ):
        result = db.execute(
            text(f"UPDATE users SET {', '.join(updates)} WHERE id = :id"),
            params
        )
        if result.rowcount == 0:
            raise NotFoundError("User not found.")
        db.commit()

    return MessageResponse(message="Profile updated successfully.")
