"""
API routes package.

Public registration endpoints and the admin surface, mounted under /api.
"""

from fastapi import APIRouter

from src.api.routes.admin import router as admin_router
from src.api.routes.registrations import router as registrations_router

router = APIRouter()
router.include_router(registrations_router)
router.include_router(admin_router)

__all__ = ["router"]
