"""
Tavvy Pros Web API - FastAPI application.

Auth is Supabase JWT (see onboarding/api.py); the onboarding wizard is mounted
under /api/onboarding.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from onboarding.api import router as onboarding_router
from tavvy_pros import __version__
from tavvy_pros.config import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(title="Tavvy Pros", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(onboarding_router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint for the load balancer."""
        return {"status": "healthy"}

    logger.info(f"Tavvy Pros API ready ({settings.tavvy_env})")
    return app


app = create_app()
