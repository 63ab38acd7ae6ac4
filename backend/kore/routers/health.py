from fastapi import APIRouter

from kore.config import settings

router = APIRouter()

API_VERSION = "0.1.0"


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "environment": settings.app_env,
        "version": API_VERSION,
    }
