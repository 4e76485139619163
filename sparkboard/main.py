from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sparkboard.core.config import settings
from sparkboard.core.errors import register_exception_handlers
from sparkboard.core.log import LogConfig, logger
from sparkboard.api.api import api_router
from sparkboard.db.session import dispose_engine, init_db

LogConfig.configure_global_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    # Startup
    logger.info("Starting {} {}", settings.PROJECT_NAME, settings.VERSION)
    if settings.CREATE_TABLES_ON_STARTUP:
        init_db()

    yield

    # Shutdown
    logger.info("Shutting down {}", settings.PROJECT_NAME)
    dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
)

# Set up CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count", "X-Page", "X-Page-Size", "X-Has-More"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix=settings.API_PREFIX)
