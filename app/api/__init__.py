"""API routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from app.api import admin, auth, callbacks, health, me, reviews

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(me.router, prefix="/me", tags=["profile"])
router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
router.include_router(callbacks.router, prefix="/callbacks", tags=["callbacks"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(health.router, prefix="/health", tags=["health"])
