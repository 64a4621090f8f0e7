from fastapi import APIRouter

from scoreboard_proxy.api.endpoints import info

api_router = APIRouter()

api_router.include_router(info.router, prefix="/info", tags=["info"])
