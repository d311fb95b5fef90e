"""FastAPI application entry point.

This module initialises the FastAPI app, configures logging and
registers API routes.  The `uvicorn` ASGI server can point to
``persona_chat.main:app`` to serve the application, or the
``persona-chat`` console script can be used.
"""

from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .config.app_config import AppConfig, get_app_config
from .controllers.chat_controller import router as chat_router
from .controllers.persona_controller import router as persona_router
from .utils.error_handler import (
    ChatError,
    ResourceNotFoundError,
    http_exception_handler,
    not_found_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from .utils.logger import setup_logging


def create_app(app_config: AppConfig | None = None) -> FastAPI:
    """Create and configure a FastAPI application."""
    app_config = app_config or get_app_config()
    setup_logging(app_config)

    app = FastAPI(title="Persona Chat", version="0.1.0", debug=app_config.app_debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=3600,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ResourceNotFoundError, not_found_exception_handler)
    app.add_exception_handler(ChatError, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(persona_router, prefix=app_config.api_prefix)
    app.include_router(chat_router, prefix=app_config.api_prefix)

    @app.get(f"{app_config.api_prefix}/health", tags=["Health"])
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        logger.debug("Health check invoked")
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    app_config = get_app_config()
    uvicorn.run(
        "persona_chat.main:app",
        host=app_config.app_host,
        port=app_config.app_port,
        reload=app_config.app_debug,
        log_config=None,
    )


# Create an application instance for ASGI servers
app = create_app()


if __name__ == "__main__":
    run()
