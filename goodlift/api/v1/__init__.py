"""API v1 router aggregation."""

from fastapi import APIRouter

from goodlift.api.v1.endpoints import (
    exercises,
    favorites,
    generator,
    health,
    preferences,
    progress,
    tools,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(generator.router, prefix="/generator", tags=["generator"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(preferences.router, prefix="/preferences", tags=["preferences"])
api_router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
api_router.include_router(progress.router, prefix="/progress", tags=["progress"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
