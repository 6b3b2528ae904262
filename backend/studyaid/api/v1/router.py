from fastapi import APIRouter

from studyaid.api.v1 import health, documents, study

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(health.router)
api_router.include_router(documents.router)
api_router.include_router(study.router)
