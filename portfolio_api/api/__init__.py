"""API routes, mounted under API_PREFIX (default /api)."""

from fastapi import APIRouter

from portfolio_api.api import about, auth, contact, projects, skills, upload

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(about.router, prefix="/about", tags=["about"])
router.include_router(skills.router, prefix="/skills", tags=["skills"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(upload.router, prefix="/upload", tags=["upload"])
