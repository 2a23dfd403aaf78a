"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quill.config import Settings, check_settings
from quill.interface.api.errors import register_error_handlers
from quill.interface.api.middleware import IdentityMiddleware
from quill.interface.api.routes import blogs, comments, health, likes, users
from quill.util.di.container import create_container, setup_di
from quill.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does it and passes a test container.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()
    check_settings(settings)

    app_instance = FastAPI(
        title="Quill API",
        description="Backend API for Quill - a small blogging platform",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(IdentityMiddleware)
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(blogs.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(likes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
