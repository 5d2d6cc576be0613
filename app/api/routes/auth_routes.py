"""
Authentication Routes

POST /register - Register new user (multipart, profilePicture required)
POST /login - Check credentials and return the user's profile
"""

from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.db.database import get_db, fetch_one
from app.core.auth import hash_password, verify_password
from app.core.errors import AuthError, ValidationError, database_errors
from app.core.logging import get_logger
from app.utils.file_upload import discard_on_error, has_file, save_upload, validate_image
from app.utils.validation import require_fields
from app.schemas.schemas import LoginRequest, LoginResponse, MessageResponse, UserProfile

router = APIRouter(tags=["Authentication"])
logger = get_logger("routes.auth")


@router.post("/register", response_model=MessageResponse, status_code=201)
def register(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    user_type: Optional[str] = Form(None),
    profilePicture: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    """
    Register a new user account with a profile picture.

    The picture is only written to disk after every field has been checked.
    """
    require_fields(
        "Please provide name, email, password, user_type, and a profile picture.",
        name, email, password, user_type,
    )
    if not has_file(profilePicture):
        raise ValidationError("Please provide name, email, password, user_type, and a profile picture.")
    validate_image(profilePicture)

    password_hash = hash_password(password)
    picture_path = save_upload(profilePicture)

    with discard_on_error(picture_path), database_errors(
        "Database error during registration.", db, conflict_message="Email already registered."
    ):
        db.execute(
            text("""
                INSERT INTO users (name, email, password, user_type, profile_picture)
                VALUES (:name, :email, :password, :user_type, :profile_picture)
            """),
            {
                "name": name,
                "email": email,
                "password": password_hash,
                "user_type": user_type,
                "profile_picture": picture_path,
            }
        )
        db.commit()

    logger.info("Registered %s user %s", user_type, email)
    return MessageResponse(message="User registered successfully.")


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Check email and password.

    No token is issued; the client keeps the returned profile itself.
    """
    require_fields("Please provide both email and password.", request.email, request.password)

    with database_errors("Database query error.", db):
        user = fetch_one(
            db,
            "SELECT id, name, email, password, user_type, profile_picture FROM users WHERE email = :email",
            {"email": request.email}
        )

    if not user or not verify_password(request.password, user["password"]):
        raise AuthError("Invalid email or password.")

    return LoginResponse(
        message="Login successful",
        user=UserProfile(
            id=user["id"], user_type=user["user_type"], name=user["name"],
            email=user["email"], profile_picture=user["profile_picture"]
        )
    )
