from google import genai
from google.genai import types


class GeminiClient:
    """Thin wrapper over google-genai. One call, no retries; errors propagate."""

    def __init__(self, api_key: str, timeout_seconds: float = 30.0):
        if not api_key:
            raise RuntimeError("GEMINI_API_KEY is missing")
        self.client = genai.Client(
            api_key=api_key,
            # HttpOptions.timeout is in milliseconds
            http_options=types.HttpOptions(timeout=int(timeout_seconds * 1000)),
        )

    def generate(self, model: str, prompt: str) -> str:
        resp = self.client.models.generate_content(
            model=model,
            contents=prompt,
            # Ask for JSON output
            config={"response_mime_type": "application/json"},
        )
        return (resp.text or "").strip()
