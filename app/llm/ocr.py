import json
import logging
import re
from typing import Any, Dict, Optional, Tuple

from app.llm.client import Completion, ModelClient
from app.llm.fences import extract_fenced_block
from app.llm.prompts import SCHEMA_VERSION, ocr_system_prompt, ocr_user_prompt
from app.normalizers import JsonValue, get_default_normalizer
from app.settings import Settings

logger = logging.getLogger(__name__)

_BARE_BASE64 = re.compile(r"^[A-Za-z0-9+/=]+$")

# ---------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------

def coerce_image_data(image_data: str) -> str:
    """
    The browser normally sends a data URL. Bare base64 gets a JPEG data-URL
    prefix; anything else (e.g. an https URL) is passed on unchanged.
    """
    if image_data.startswith("data:image/"):
        return image_data
    if _BARE_BASE64.match(image_data):
        logger.info("image data has no data-URL prefix, assuming JPEG")
        return f"data:image/jpeg;base64,{image_data}"
    return image_data

def build_messages(settings: Settings, image_url: str, metadata: Optional[Dict[str, Any]] = None):
    """System prompt, then the user prompt with the image attached."""
    metadata = metadata or {}
    return [
        {"role": "system", "content": ocr_system_prompt(settings)},
        {
            "role": "user",
            "content": [
                {
                    "type": "text",
                    "text": ocr_user_prompt(settings, metadata.get("width"), metadata.get("height")),
                },
                {"type": "image_url", "image_url": {"url": image_url, "detail": "high"}},
            ],
        },
    ]

# ---------------------------------------------------------------------
# Response helpers
# ---------------------------------------------------------------------

def parse_model_json(text: str) -> JsonValue:
    """Parse the model's answer, with or without a ```json fence. Raises ValueError."""
    return json.loads(extract_fenced_block(text, "json"))

def parse_failure(text: str) -> Dict[str, Any]:
    """What the client gets instead of a problem tree when the model didn't answer in JSON."""
    return {
        "error": "JSON parse failed",
        "raw_response": text,
        "schema_version": SCHEMA_VERSION,
    }

# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def extract_problem_json(
    client: ModelClient,
    image_data: str,
    image_metadata: Optional[Dict[str, Any]],
    settings: Settings,
) -> Tuple[JsonValue, Completion]:
    """
    Turn a problem image into structured JSON.
    1. Build the vision prompt around the image
    2. Call the remote model
    3. Strip fences, parse, and annotate every "text" with "text_latex"
    A non-JSON answer is not an error: it comes back wrapped by parse_failure().
    """
    messages = build_messages(settings, coerce_image_data(image_data), image_metadata)
    completion = client.complete(
        messages,
        model=settings.ocr_model,
        max_tokens=settings.ocr_max_tokens,
        temperature=settings.temperature,
    )
    try:
        data = parse_model_json(completion.content)
    except ValueError:
        logger.warning("model output is not JSON: %.200s", completion.content)
        return parse_failure(completion.content), completion
    return get_default_normalizer().normalize(data), completion
