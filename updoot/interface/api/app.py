"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from updoot.config import Settings
from updoot.interface.api.routes import health
from updoot.interface.graphql import get_context, schema
from updoot.util.di.container import create_container, setup_di
from updoot.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Application settings (loaded from environment if omitted)
        container: DI container (production container if omitted)
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Updoot API",
        description="GraphQL backend for Updoot, a link aggregation and voting site",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # The session cookie is sent cross-origin, so credentials must be allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "User-Agent"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    graphql_router = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide=None if settings.is_production else "graphiql",
    )

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(graphql_router, prefix="/graphql")

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
