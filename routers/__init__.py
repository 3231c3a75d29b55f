# routers/__init__.py

from fastapi import APIRouter

from .auth import router as auth_router
from .access import router as access_router


# Everything mounted under settings.API_PREFIX
api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(access_router)

__all__ = ["api_router"]
