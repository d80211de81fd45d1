"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from clubmiles.api.v1.routes import auth, stats, activities, admin

# Mounted at /auth
auth_router = APIRouter()
auth_router.include_router(auth.router, tags=["Auth"])

# Mounted at /api
api_router = APIRouter()
api_router.include_router(stats.router, tags=["Stats"])
api_router.include_router(activities.router, tags=["Activities"])
api_router.include_router(admin.router, tags=["Admin"])
