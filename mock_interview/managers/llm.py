from typing import Any, Optional

import openai
import structlog

from ..core.config import Settings
from ..core.exceptions import ConfigurationError, UpstreamModelError
from ..core.interfaces import LanguageModel
from .parsing import parse_model_json

logger = structlog.get_logger(__name__)


class OpenAILanguageModel(LanguageModel):
    def __init__(self, settings: Settings):
        if not settings.OPENAI_API_KEY:
            raise ConfigurationError("OPENAI_API_KEY is required")
        self.client = openai.AsyncOpenAI(api_key=settings.OPENAI_API_KEY)
        self.model = settings.AI_MODEL
        self.temperature = settings.AI_TEMPERATURE

    async def generate(self, prompt: str) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
            )
        except openai.OpenAIError as e:
            raise UpstreamModelError(f"OpenAI API error: {e}", provider="openai") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise UpstreamModelError("Empty response from OpenAI", provider="openai")
        return content


async def request_json(model: LanguageModel, prompt: str) -> Optional[Any]:
    """Run one model call and decode its reply; None on any upstream failure."""
    try:
        text = await model.generate(prompt)
    except UpstreamModelError as e:
        logger.error("model_call_failed", error=str(e), provider=e.provider)
        return None

    parsed = parse_model_json(text)
    if parsed is None:
        logger.warning("model_reply_unparseable", reply_length=len(text))
    return parsed
