from fastapi import APIRouter
from school_admin.api.v1.endpoints import school

api_router = APIRouter()

api_router.include_router(school.router)
