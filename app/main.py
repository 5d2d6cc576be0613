"""
Career Guidance API - Main Application

FastAPI backend with:
- Relational database through SQLAlchemy (raw SQL, one session per request)
- bcrypt password hashing
- Image uploads stored on local disk and served from /uploads

Run: uvicorn app.main:app --reload
"""

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.routes import api_router
from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.db.database import init_db, test_database_connection

settings = get_settings()
logger = setup_logging()

# Create FastAPI app
app = FastAPI(
    title="Career Guidance API",
    description="""
    Backend for a career and university-admissions guidance platform.

    ## Features
    - **Accounts**: registration with profile picture, login, profile updates
    - **Catalog**: institutions, faculties and courses
    - **Applications**: student applications with up to eight subject grades
    - **Admissions**: batch publishing of admissions from applications
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all by default)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router)

# Stored uploads are referenced by path in users/institutions rows
app.mount("/uploads", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Prepare the upload directory and database schema."""
    os.makedirs(settings.upload_dir, exist_ok=True)
    logger.info("Uploads stored in %s", os.path.abspath(settings.upload_dir))
    if settings.auto_create_schema:
        init_db()


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "Career Guidance API"}


@app.get("/health", tags=["Health"])
def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "database": "connected" if test_database_connection() else "disconnected"
    }
