from fastapi import APIRouter

from blemap.api.routes.routes_auth import router as auth_router
from blemap.api.routes.routes_project import router as project_router
from blemap.api.routes.routes_placement import router as placement_router


api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(project_router, prefix="/projects", tags=["projects"])
api_router.include_router(placement_router, prefix="/placement", tags=["placement"])
