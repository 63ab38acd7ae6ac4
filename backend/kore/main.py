from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kore.config import settings
from kore.routers import health, similarity
from kore.routers.health import API_VERSION


def _build_allowed_origins() -> list[str]:
    origins = [settings.frontend_url]
    if settings.app_env.lower() != "production":
        for origin in ("http://localhost:3000", "http://localhost:5173"):
            if origin not in origins:
                origins.append(origin)
    return origins


app = FastAPI(
    title="Kore Duplicate Check API",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_build_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(similarity.router, prefix="/api")
