from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from guestportal.app import App
from guestportal.config import Config
from guestportal.errors import UserError
from guestportal.web.error_handlers import general_exception_handler, request_validation_error_handler, user_error_handler
from guestportal.web.openapi import set_custom_openapi
from guestportal.web.routers import login_router, pages_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        app.state.app = app_instance
        async with app_instance.lifespan():
            yield

    app = FastAPI(title="Guest Portal", lifespan=lifespan)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(login_router, prefix="/api")
    # Catch-all page routes go last
    app.include_router(pages_router)

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
