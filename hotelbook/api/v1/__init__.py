"""API v1 routes."""

from fastapi import APIRouter

from hotelbook.api.v1 import auth, health, hotels, rooms, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(hotels.router, prefix="/hotels", tags=["hotels"])
router.include_router(rooms.router, prefix="/rooms", tags=["rooms"])
