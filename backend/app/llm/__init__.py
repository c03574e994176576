from functools import lru_cache

from backend.app.config import (
    AI_DEADLINE_SECONDS,
    AI_REQUEST_TIMEOUT_SECONDS,
    GEMINI_API_KEY,
    GEMINI_MODELS,
    LLM_MODE,
)
from backend.app.llm.gateway import AIGateway
from backend.app.llm.gemini import GeminiClient


@lru_cache(maxsize=1)
def get_gateway() -> AIGateway:
    client = None
    if LLM_MODE == "gemini" and GEMINI_API_KEY:
        client = GeminiClient(api_key=GEMINI_API_KEY, timeout_seconds=AI_REQUEST_TIMEOUT_SECONDS)
    return AIGateway(client=client, models=GEMINI_MODELS, deadline_seconds=AI_DEADLINE_SECONDS)
