from fastapi import APIRouter
from catalog.api.routes import items, images

api_router = APIRouter()
api_router.include_router(items.router, tags=["items"])
api_router.include_router(images.router, tags=["images"])
