from fastapi import APIRouter

from warranty_api.api.assignments import assignments_router

api_router = APIRouter()
api_router.include_router(assignments_router)
