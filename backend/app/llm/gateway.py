import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from backend.app.llm.json_repair import repair
from backend.app.llm.mock import respond
from backend.app.llm.provider import TextGenerator

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "You are an expert technical interviewer."
JSON_ONLY = "IMPORTANT: Return ONLY valid JSON. No markdown formatting."


@dataclass(frozen=True)
class PromptRequest:
    task_prompt: str
    role_description: str = DEFAULT_ROLE

    def full_prompt(self) -> str:
        return f"{self.role_description}\n\nTask: {self.task_prompt}\n\n{JSON_ONLY}"


@dataclass(frozen=True)
class ModelAttempt:
    model_id: str
    order: int


class AIGateway:
    """
    Tries each configured model once, in priority order, and returns the first
    reply that repairs into a JSON object. Any failure (transport, quota,
    unknown model, unparseable text) moves on to the next model. When there is
    no client or every model fails, the smart mock answers instead, so
    generate() always returns a dict.
    """

    def __init__(
        self,
        client: Optional[TextGenerator],
        models: Sequence[str],
        responder: Callable[[str], Dict[str, Any]] = respond,
        deadline_seconds: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.models = [m for m in models if m]
        self.responder = responder
        self.deadline_seconds = deadline_seconds
        self.clock = clock

    @property
    def mode(self) -> str:
        return "gemini" if self.client is not None else "mock"

    def attempts(self) -> List[ModelAttempt]:
        return [ModelAttempt(model_id=m, order=i) for i, m in enumerate(self.models)]

    def generate(self, task_prompt: str, role_description: str = DEFAULT_ROLE) -> Dict[str, Any]:
        request = PromptRequest(task_prompt=task_prompt, role_description=role_description)

        if self.client is None:
            logger.info("No AI credential configured; using smart mock")
            return self.responder(request.task_prompt)

        result = self._try_models(request)
        if result is not None:
            return result

        logger.warning("All AI models failed; switching to smart mock")
        return self.responder(request.task_prompt)

    def _try_models(self, request: PromptRequest) -> Optional[Dict[str, Any]]:
        started = self.clock()
        prompt = request.full_prompt()

        for attempt in self.attempts():
            if self.deadline_seconds and self.clock() - started >= self.deadline_seconds:
                logger.warning("AI deadline of %.1fs reached before %s", self.deadline_seconds, attempt.model_id)
                return None

            logger.info("Attempting model %s (priority %d)", attempt.model_id, attempt.order)
            try:
                text = self.client.generate(attempt.model_id, prompt)
            except Exception as e:
                logger.warning("Model %s failed: %s", attempt.model_id, e)
                continue

            parsed = repair(text)
            if isinstance(parsed, dict):
                logger.info("Success with %s", attempt.model_id)
                return parsed
            logger.warning("Model %s returned no usable JSON object", attempt.model_id)

        return None
