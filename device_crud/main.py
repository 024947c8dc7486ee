# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import device_router, register_error_handlers
from .core.config import get_settings
from .di.container import reset_container
from .infrastructure.db.mongo_connection import close_connection

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    The MongoDB client is opened lazily on first use and closed on shutdown.
    """
    logger.info("Device CRUD backend started")

    yield

    # Shutdown: drop the container and the MongoDB client it holds
    reset_container()
    close_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error handlers and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    # Create FastAPI app
    application = FastAPI(
        title="Device CRUD API",
        version="1.0.0",
        description="Create, update, fetch and delete devices",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    # Register API routers
    application.include_router(device_router, prefix="/private/v1/device")

    @application.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "ok"}

    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
