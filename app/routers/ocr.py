import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.errors import MissingCredentialsError, ModelCallError
from app.llm import build_model_client, extract_problem_json
from app.normalizers import get_default_normalizer
from app.samples import is_sample_request, sample_problem
from app.settings import Settings, get_settings
from app.timeutil import now_iso

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/api", tags=["ocr"])

# Upstream status -> what we tell the user
UPSTREAM_MESSAGES = {
    400: "OpenAI API: bad request. Check the image format.",
    401: "OpenAI API: authentication failed. Check the API key.",
    429: "OpenAI API: rate limit exceeded. Try again shortly.",
    500: "OpenAI API: server error. Try again shortly.",
}
GENERIC_MESSAGE = "OCR processing failed."


# Request schema: the browser sends camelCase keys
class OcrRequest(BaseModel):
    imageData: Optional[str] = None                 # data URL or bare base64
    imageMetadata: Optional[Dict[str, Any]] = None  # width/height/size/type of the upload


def _error(message: str, details: str, status: int) -> JSONResponse:
    return JSONResponse(
        {"error": message, "details": details, "status": status, "timestamp": now_iso()},
        status_code=status,
    )


@router.get("/ocr")
def ocr_status(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {
        "message": "OCR API is up.",
        "endpoint": "/api/ocr",
        "methods": ["GET", "POST"],
        "environment": settings.app_env,
        "hasApiKey": settings.has_api_key,
        "timestamp": now_iso(),
    }


@router.post("/ocr")
def ocr(req: OcrRequest, request: Request, settings: Settings = Depends(get_settings)):
    """
    Send an exam-problem image to the vision model and return its JSON,
    with "text_latex" added next to every "text".

    Request body:
      {"imageData": "data:image/jpeg;base64,...", "imageMetadata": {"width": 800, "height": 600}}

    Response JSON:
      {
        "success": True,
        "data": { ... problem tree ... },
        "metadata": {"model": "gpt-4o", "tokens_used": 1234, "timestamp": "..."}
      }
    """
    if not req.imageData:
        raise HTTPException(400, "imageData is required")

    meta = req.imageMetadata or {}
    logger.info("OCR request: %d chars of image data, metadata=%s", len(req.imageData), meta)

    # Demo path: canned problem, no model call and no shot spent
    if is_sample_request(req.imageData):
        data = get_default_normalizer().normalize(sample_problem(meta.get("width"), meta.get("height")))
        return {"success": True, "data": data, "timestamp": now_iso()}

    limiter = request.app.state.limiter
    caller = request.client.host if request.client else "unknown"
    if not limiter.try_acquire(caller):
        raise HTTPException(429, "The demo allows a single OCR call. Reset to try again.")

    try:
        client = build_model_client(settings)
        data, completion = extract_problem_json(client, req.imageData, meta, settings)
    except MissingCredentialsError as e:
        limiter.release(caller)
        logger.error("OCR request without credentials: %s", e)
        return _error(str(e), str(e), 500)
    except ModelCallError as e:
        limiter.release(caller)
        status = e.status or 500
        logger.error("OCR model call failed (status=%s): %s", e.status, e)
        return _error(UPSTREAM_MESSAGES.get(status, GENERIC_MESSAGE), str(e), status)
    except Exception as e:
        limiter.release(caller)
        logger.exception("OCR request failed: %s", e)
        return _error(GENERIC_MESSAGE, str(e), 500)

    return {
        "success": True,
        "data": data,
        "metadata": {
            "model": settings.ocr_model,
            "tokens_used": completion.tokens_used,
            "timestamp": now_iso(),
        },
    }


@router.post("/demo/reset")
def demo_reset(request: Request) -> Dict[str, Any]:
    """Give the caller its demo OCR call back (the UI's Reset button)."""
    caller = request.client.host if request.client else "unknown"
    request.app.state.limiter.release(caller)
    return {"ok": True}
