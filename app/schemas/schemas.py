"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Request fields are Optional on purpose: presence is checked by the route
handlers so a missing field answers 400 with the route's own message.
"""

from pydantic import BaseModel, field_validator
from typing import Optional, List, Any


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value == "":
        return None
    return value


def _number_to_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class UserProfile(BaseModel):
    id: int
    user_type: str
    name: str
    email: str
    profile_picture: Optional[str] = None

class LoginResponse(BaseModel):
    message: str
    user: UserProfile


# ============================================================
# USER SCHEMAS
# ============================================================

class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    user_type: str
    profile_picture: Optional[str] = None
    phone: Optional[str] = None


# ============================================================
# INSTITUTION SCHEMAS
# ============================================================

class InstitutionResponse(BaseModel):
    id: int
    name: str
    number_of_students: int
    number_of_departments: int
    number_of_courses: int
    logo: Optional[str] = None

class InstitutionCreatedResponse(BaseModel):
    message: str
    institution: InstitutionResponse

class UniversityResponse(BaseModel):
    id: int
    name: str
    number_of_students: int
    number_of_departments: int
    number_of_courses: int

class InstitutionSummaryResponse(BaseModel):
    name: str
    count: int


# ============================================================
# FACULTY / COURSE SCHEMAS
# ============================================================

class FacultyCreate(BaseModel):
    name: Optional[str] = None
    institution_id: Optional[int] = None

    @field_validator("institution_id", mode="before")
    @classmethod
    def blank_id(cls, value: Any) -> Any:
        return _blank_to_none(value)

class FacultyResponse(BaseModel):
    id: int
    name: str
    institution_id: int

class CourseCreate(BaseModel):
    name: Optional[str] = None
    faculty: Optional[int] = None
    institution: Optional[int] = None

    @field_validator("faculty", "institution", mode="before")
    @classmethod
    def blank_ids(cls, value: Any) -> Any:
        return _blank_to_none(value)

class CourseListItem(BaseModel):
    id: int
    name: str
    university: str
    requirements: str


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class GradeEntry(BaseModel):
    subject: Optional[str] = ""
    grade: Optional[str] = ""

    @field_validator("subject", "grade", mode="before")
    @classmethod
    def as_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        return _number_to_str(value)

class ApplicationCreate(BaseModel):
    student_name: Optional[str] = None
    phone_number: Optional[str] = None
    student_id: Optional[str] = None
    university: Optional[str] = None
    course_id: Optional[int] = None
    faculty: Optional[str] = None
    major_subject: Optional[str] = None
    grades: Optional[List[GradeEntry]] = None

    @field_validator("phone_number", "student_id", "university", "faculty", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        return _number_to_str(value)

    @field_validator("course_id", mode="before")
    @classmethod
    def blank_course(cls, value: Any) -> Any:
        return _blank_to_none(value)

class ApplicationCreatedResponse(BaseModel):
    message: str
    application_id: int


# ============================================================
# ADMISSION SCHEMAS
# ============================================================

class PublishAdmissionsRequest(BaseModel):
    # Shape is checked by the handler so a non-list gets the route's 400 message
    application_ids: Optional[Any] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True
