import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resource_hub.api_routers.v1 import api_router
from resource_hub.features.health.routes.health import router as health_router
from resource_hub.platform.config import settings
from resource_hub.platform.db.session import init_db
from resource_hub.platform.exceptions import add_exception_handlers
from resource_hub.platform.logger import LOG_FORMAT

# Modules using logging.getLogger share this root configuration
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Initializing {settings.APP_NAME} backend ({settings.ENVIRONMENT})")
    await init_db()
    yield


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="API for sharing college study resources",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)


# Root endpoint for basic info
@app.get("/", tags=["Info"])
def root():
    return {
        "app_name": f"{settings.APP_NAME} API",
        "description": "Share, bookmark and rate college resources.",
        "version": "1.0.0",
        "docs_url": "/docs",
        "api_base": "/api/v1",
    }


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_exception_handlers(app)

app.include_router(health_router)
app.include_router(api_router, prefix="/api/v1")
