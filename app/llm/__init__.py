from .client import Completion, ModelClient, OpenAIModelClient, build_model_client
from .ocr import extract_problem_json
from .render import render_problem_html

__all__ = [
    "Completion",
    "ModelClient",
    "OpenAIModelClient",
    "build_model_client",
    "extract_problem_json",
    "render_problem_html",
]
