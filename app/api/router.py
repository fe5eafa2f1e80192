from fastapi import APIRouter

from api.routes.groups import admin_router as admin_groups_router
from api.routes.groups import router as groups_router
from api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(groups_router)
api_router.include_router(admin_groups_router)
