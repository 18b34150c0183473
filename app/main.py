from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI

from .routers.status import router as status_router
from .routers.ocr import router as ocr_router
from .routers.render import router as render_router
from .routers.normalize import router as normalize_router
from app.demo_limit import OneShotLimiter
from app.settings import get_settings
from app.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(get_settings().log_level) # Init Logging

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context runs once at startup and once at shutdown.
    Nothing is loaded locally: we only record whether the model
    provider is configured, and set up the demo call limiter.
    """
    settings = app.dependency_overrides.get(get_settings, get_settings)()
    app.state.model_configured = settings.has_api_key
    app.state.limiter = OneShotLimiter(enabled=settings.demo_one_shot)
    if not settings.has_api_key:
        # Sample mode and /api/normalize still work; model calls will fail
        logger.warning("OPENAI_API_KEY is not set; model-backed routes will return errors")

    # Hand control back to FastAPI to serve requests
    yield
    # No special shutdown logic needed

# Create the FastAPI app instance
app = FastAPI(title="Exam OCR Demo", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - model_configured: True when an API key for the model provider is set
    """
    return {
        "ok": True,
        "service": "exam-ocr",
        "version": 1,
        "model_configured": bool(getattr(app.state, "model_configured", False)),
    }

# Register API routers:
app.include_router(status_router)
app.include_router(ocr_router)
app.include_router(render_router)
app.include_router(normalize_router)
