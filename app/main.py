"""
BhashaConnect API - Main Application

FastAPI backend with:
- MongoDB for all listing collections and users
- JWT authentication
- Jobs, training content, marketplace and government scheme listings

Run: uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from app.api.routes import api_router
from app.core.config import get_settings
from app.core.error_handlers import setup_exception_handlers
from app.core.logging_config import setup_logging
from app.db.mongodb import close_mongo_client, init_mongo_indexes

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="""
    Multilingual listings for jobs, training content, marketplace entries
    and government schemes.

    ## Features
    - **Authentication**: JWT-based auth with user, entrepreneur and admin roles
    - **Listings**: Filter, search and paginate every resource
    - **Ownership**: Only the creator (or an admin) can change a listing
    """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
    )

    # CORS middleware (single allowed frontend origin)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event():
        """Initialize MongoDB indexes on startup."""
        try:
            init_mongo_indexes()
        except PyMongoError as e:
            logger.warning("MongoDB index initialization failed: %s", e)
        logger.info("%s API running on port %s", settings.app_name, settings.port)

    @app.on_event("shutdown")
    async def shutdown_event():
        close_mongo_client()

    return app


app = create_app()
