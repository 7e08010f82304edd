# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import control_router
from .application.orchestrator import CaptureOrchestrator
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.http_client_factory import close_shared_http_client
from .processing.data_input.camera_source import OpenCVCameraSource

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup and shutdown of the capture pipeline.

    Builds the container, speaks the ready message and starts the periodic
    capture loop; on shutdown stops the loop, releases the camera and closes
    the shared HTTP client.
    """
    orchestrator = None
    try:
        container = get_container()
        orchestrator = container.get(CaptureOrchestrator)
        await orchestrator.start()
    except Exception as e:
        logger.error(f"Failed to start capture orchestrator: {e}", exc_info=True)

    yield

    if orchestrator is not None:
        try:
            await orchestrator.stop()
        except Exception as e:
            logger.error(f"Error stopping capture orchestrator: {e}", exc_info=True)

        camera = orchestrator.camera
        if isinstance(camera, OpenCVCameraSource):
            camera.close()

    await close_shared_http_client()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Build the NeuroLens control API.

    Loads .env before the first get_settings() call so the environment it
    defines is what Settings sees, then configures logging from LOG_LEVEL and
    mounts the control router under /api/v1/control.

    Returns:
        FastAPI app whose lifespan owns the capture loop
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(
        title="NeuroLens API",
        version="1.0.0",
        description="Perception-to-narration orchestrator control surface",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:8081",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(control_router, prefix="/api/v1/control")

    return application


app = create_application()
