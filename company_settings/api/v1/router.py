from fastapi import APIRouter

from company_settings.api.v1.endpoints import actions, health, operations, settings, users


api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(settings.router)
api_router.include_router(operations.router)
api_router.include_router(actions.router)
api_router.include_router(users.router)
