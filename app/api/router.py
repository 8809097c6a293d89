from fastapi import APIRouter

from api.routes.translations import router as translations_router

api_router = APIRouter()

api_router.include_router(translations_router)
