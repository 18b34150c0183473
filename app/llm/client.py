import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

import openai
from openai import OpenAI

from app.errors import MissingCredentialsError, ModelCallError
from app.settings import Settings

logger = logging.getLogger(__name__)

Message = Dict[str, Any]


@dataclass
class Completion:
    """What we keep from a chat completion."""
    content: str
    tokens_used: int = 0


class ModelClient(Protocol):
    def complete(
        self,
        messages: List[Message],
        *,
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> Completion:
        ...


class OpenAIModelClient:
    """
    Thin wrapper over the OpenAI chat-completions API.
    SDK errors are translated to ModelCallError so the routers
    never have to import openai types.
    """
    def __init__(self, api_key: Optional[str], base_url: Optional[str] = None, timeout: float = 60.0):
        if not api_key:
            raise MissingCredentialsError(
                "OpenAI API key is not configured. Set OPENAI_API_KEY in the environment."
            )
        kwargs: Dict[str, Any] = {"api_key": api_key, "timeout": timeout}
        if base_url:
            kwargs["base_url"] = base_url
        self._client = OpenAI(**kwargs)

    def complete(self, messages, *, model, max_tokens, temperature) -> Completion:
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except openai.APIStatusError as e:
            raise ModelCallError(str(e), status=e.status_code) from e
        except openai.APIError as e:
            # connection errors and timeouts carry no status
            raise ModelCallError(str(e)) from e

        content = response.choices[0].message.content or ""
        tokens = response.usage.total_tokens if response.usage else 0
        logger.info("model=%s tokens=%s chars=%s", model, tokens, len(content))
        return Completion(content=content, tokens_used=tokens)


def build_model_client(settings: Settings) -> ModelClient:
    """Factory used by the API layer. Configuration comes in explicitly."""
    return OpenAIModelClient(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.timeout,
    )
