"""
Main FastAPI application for the Metaverse Realty API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..app_context import AppContext, create_app_context
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


def create_app(app_context: AppContext | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app_context = app_context or create_app_context()
    settings = app_context.settings

    configure_logging(level=settings.log_level, json_output=settings.is_production)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(
            "Server ready",
            url=settings.public_url,
            graphql_path=settings.graphql_path,
            environment=settings.environment,
        )
        yield
        logger.info("Shutting down Metaverse Realty API...")

    app = FastAPI(
        title="Metaverse Realty API",
        description="Mock GraphQL API for real estate in the metaverse",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.app_context = app_context

    app.add_middleware(LoggingContextMiddleware, graphql_path=settings.graphql_path)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Fail fast: the server must not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema(app_context.schema)

    app.include_router(create_graphql_router(app_context), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)

    return app
