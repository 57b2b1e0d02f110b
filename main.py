"""
Olivia Chat Proxy
FastAPI application relaying chat messages to the OpenAI completions API.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chat_proxy import __version__
from chat_proxy.config.settings import get_settings
from chat_proxy.api.routers import api_router
from chat_proxy.api.endpoints.chat import close_completion_clients
from chat_proxy.middleware.request_logging import RequestLoggingMiddleware
from chat_proxy.middleware.error_handling import ErrorHandlingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    settings = get_settings()
    logging.info(f"Starting {settings.app_name} ({settings.environment})")

    if not settings.openai_configured:
        logging.error("OpenAI configuration missing! Check OPENAI_API_KEY")
    else:
        logging.info(
            f"OpenAI configured: timeout={settings.fetch_timeout}ms, "
            f"max_retries={settings.openai_max_retries}"
        )

    yield

    logging.info("Shutting down...")
    await close_completion_clients()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_name,
        description="Single-endpoint chat proxy in front of the OpenAI completions API",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
