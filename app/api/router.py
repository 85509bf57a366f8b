"""Router aggregating all endpoint routers."""

from fastapi import APIRouter

from app.api.endpoints import hello, home

api_router = APIRouter()

api_router.include_router(home.router, tags=["status"])
api_router.include_router(hello.router, prefix="/api", tags=["hello"])
