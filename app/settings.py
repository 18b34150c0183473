# app/settings.py
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Defaults for the two model calls
OCR_MODEL = "gpt-4o"
RENDER_MODEL = "gpt-4.1"
MAX_TOKENS = 4000
TEMPERATURE = 0.1


class Settings(BaseModel):
    """Runtime configuration. Built once from the environment, then passed around."""
    model_config = ConfigDict(frozen=True)

    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    ocr_model: str = OCR_MODEL
    render_model: str = RENDER_MODEL
    ocr_max_tokens: int = MAX_TOKENS
    render_max_tokens: int = MAX_TOKENS
    temperature: float = TEMPERATURE
    timeout: float = 60.0
    # Optional on-disk prompt templates; built-in prompts are used when unset
    ocr_system_prompt_file: Optional[Path] = None
    ocr_user_prompt_file: Optional[Path] = None
    render_system_prompt_file: Optional[Path] = None
    app_env: str = "development"
    log_level: str = "INFO"
    demo_one_shot: bool = False

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key)


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    return Path(raw) if raw else None


def load_settings() -> Settings:
    """Read settings from the environment (and a project-level .env, if any)."""
    load_dotenv(PROJECT_ROOT / ".env")
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
        ocr_model=os.getenv("OCR_MODEL", OCR_MODEL),
        render_model=os.getenv("RENDER_MODEL", RENDER_MODEL),
        ocr_max_tokens=int(os.getenv("OCR_MAX_TOKENS", MAX_TOKENS)),
        render_max_tokens=int(os.getenv("RENDER_MAX_TOKENS", MAX_TOKENS)),
        temperature=float(os.getenv("MODEL_TEMPERATURE", TEMPERATURE)),
        timeout=float(os.getenv("MODEL_TIMEOUT", 60)),
        ocr_system_prompt_file=_path("OCR_SYSTEM_PROMPT_FILE"),
        ocr_user_prompt_file=_path("OCR_USER_PROMPT_FILE"),
        render_system_prompt_file=_path("RENDER_SYSTEM_PROMPT_FILE"),
        app_env=os.getenv("APP_ENV", "development"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        demo_one_shot=_flag("DEMO_ONE_SHOT"),
    )


@lru_cache
def get_settings() -> Settings:
    """FastAPI dependency; cached so .env is only read once per process."""
    return load_settings()
