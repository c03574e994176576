from typing import Protocol


class TextGenerator(Protocol):
    def generate(self, model: str, prompt: str) -> str:
        ...
