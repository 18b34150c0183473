import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.llm import build_model_client, render_problem_html
from app.settings import Settings, get_settings
from app.timeutil import now_iso

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["render"])


class RenderRequest(BaseModel):
    jsonData: Any = None  # the (normalized) OCR result


@router.get("/render")
def render_status(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {
        "message": "HTML render API is up.",
        "endpoint": "/api/render",
        "methods": ["GET", "POST"],
        "environment": settings.app_env,
        "hasApiKey": settings.has_api_key,
        "timestamp": now_iso(),
    }


@router.post("/render")
def render(req: RenderRequest, settings: Settings = Depends(get_settings)):
    """
    Turn an OCR JSON tree into a standalone HTML document via the text model.

    Response JSON:
      {
        "success": True,
        "html": "<!DOCTYPE html>...",
        "metadata": {"model": "gpt-4.1", "tokens_used": 987, "timestamp": "...", "input_size": 2048}
      }
    """
    if not req.jsonData:
        raise HTTPException(400, "jsonData is required")

    logger.info("render request: %d chars of JSON", len(json.dumps(req.jsonData, ensure_ascii=False)))
    try:
        client = build_model_client(settings)
        html, completion, input_size = render_problem_html(client, req.jsonData, settings)
    except Exception as e:
        # anything from a missing key to an unreadable prompt file
        logger.exception("HTML render failed: %s", e)
        return JSONResponse(
            {"error": "HTML rendering failed.", "details": str(e), "timestamp": now_iso()},
            status_code=500,
        )

    return {
        "success": True,
        "html": html,
        "metadata": {
            "model": settings.render_model,
            "tokens_used": completion.tokens_used,
            "timestamp": now_iso(),
            "input_size": input_size,
        },
    }
