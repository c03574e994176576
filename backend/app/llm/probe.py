"""Check which configured Gemini models answer with the current key."""
import logging
import sys
from typing import Dict, Sequence

from backend.app.config import AI_REQUEST_TIMEOUT_SECONDS, GEMINI_API_KEY, GEMINI_MODELS
from backend.app.llm.gemini import GeminiClient
from backend.app.llm.provider import TextGenerator

logger = logging.getLogger(__name__)

PROBE_PROMPT = 'Reply with the JSON object {"ok": true}.'


def probe_models(client: TextGenerator, models: Sequence[str]) -> Dict[str, str]:
    results = {}
    for model in models:
        try:
            client.generate(model, PROBE_PROMPT)
            results[model] = "ok"
        except Exception as e:
            # SDK messages carry a long bracketed payload; keep the headline
            results[model] = f"failed: {str(e).split('[')[0].strip()}"
    return results


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    if not GEMINI_API_KEY:
        logger.error("GEMINI_API_KEY is missing. Put it in .env or set env var.")
        return 1

    client = GeminiClient(api_key=GEMINI_API_KEY, timeout_seconds=AI_REQUEST_TIMEOUT_SECONDS)
    results = probe_models(client, GEMINI_MODELS)
    for model, status in results.items():
        print(f"{model}: {status}")
    return 0 if any(s == "ok" for s in results.values()) else 2


if __name__ == "__main__":
    sys.exit(main())
