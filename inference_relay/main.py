"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, python-dotenv, inference_relay.api, inference_relay.observability
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inference_relay.api import api_router
from inference_relay.api.deps.dependencies import get_service_cache
from inference_relay.api.error_handlers import register_exception_handlers
from inference_relay.configs import get_settings
from inference_relay.observability.logger import configure_logging
from inference_relay.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

# boto3 reads AWS_* credentials from os.environ, not from pydantic settings
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    Builds the AWS clients and services once for all requests.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    try:
        _ = cache.agent_service
        _ = cache.retrieval_service
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise
    logger.info(
        "Application startup complete: region=%s, agent_id=%s, knowledge_base_id=%s",
        settings.aws.region,
        settings.bedrock.agent_id or "<unset>",
        settings.bedrock.knowledge_base_id or "<unset>",
    )

    yield

    # Shutdown
    cache.clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Inference Relay API",
        description="Relay for Bedrock agent and knowledge base inference",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.server.client_host],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "inference_relay.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
