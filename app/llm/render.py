import json
from typing import Tuple

from app.llm.client import Completion, ModelClient
from app.llm.fences import strip_code_fence
from app.llm.prompts import render_system_prompt, render_user_prompt
from app.normalizers import JsonValue
from app.settings import Settings


def render_problem_html(client: ModelClient, json_data: JsonValue, settings: Settings) -> Tuple[str, Completion, int]:
    """
    Ask the text model for a standalone HTML page describing `json_data`.
    Returns the HTML (fence stripped), the completion, and the size of the JSON sent.
    """
    json_text = json.dumps(json_data, indent=2, ensure_ascii=False)
    completion = client.complete(
        [
            {"role": "system", "content": render_system_prompt(settings)},
            {"role": "user", "content": render_user_prompt(json_text)},
        ],
        model=settings.render_model,
        max_tokens=settings.render_max_tokens,
        temperature=settings.temperature,
    )
    return strip_code_fence(completion.content, "html"), completion, len(json_text)
