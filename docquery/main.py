"""FastAPI entrypoint for the blog content query service.

Run with ``uvicorn docquery.main:app``.
"""

from fastapi import FastAPI

from docquery.api.routes_health import router as health_router
from docquery.api.routes_resources import router as resources_router
from docquery.api.routes_tools import router as tools_router
from docquery.config import get_settings
from docquery.logging_setup import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title=f"{settings.site_name} Blog Searcher",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.include_router(health_router)
    application.include_router(tools_router)
    application.include_router(resources_router)

    application.state.settings = settings
    return application


app = create_app()
