"""API v1 routes (mounted under API_PREFIX)."""

from fastapi import APIRouter

from acadtrack.api.v1 import activities, auth

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(activities.router, prefix="/activities", tags=["activities"])
