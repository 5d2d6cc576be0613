"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.auth_routes import router as auth_router
from app.api.routes.user_routes import router as user_router
from app.api.routes.institution_routes import router as institution_router
from app.api.routes.faculty_routes import router as faculty_router
from app.api.routes.course_routes import router as course_router
from app.api.routes.application_routes import router as application_router
from app.api.routes.admission_routes import router as admission_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(institution_router)
api_router.include_router(faculty_router)
api_router.include_router(course_router)
api_router.include_router(application_router)
api_router.include_router(admission_router)
