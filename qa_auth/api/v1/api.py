from fastapi import APIRouter

from qa_auth.api.v1.routes_auth import router as auth_router


api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
