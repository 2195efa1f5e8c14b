"""API routes."""

from fastapi import APIRouter

from app.api import auth, health, items

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/login", tags=["auth"])
router.include_router(items.router, prefix="/items", tags=["items"])
