from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Protocol

import httpx


@lru_cache(maxsize=1)
def _shared_http_client() -> httpx.Client:
    return httpx.Client()


class CompletionError(RuntimeError):
    """The endpoint answered, but not with usable generated text."""


@dataclass(frozen=True)
class CompletionResponse:
    content: str


class CompletionBackend(Protocol):
    def generate(self, prompt: str) -> CompletionResponse:
        ...


@dataclass(frozen=True)
class CompletionClient:
    """Text-generation client for Hugging Face style inference endpoints.

    Sends a single request with no retry and the transport's default timeout.
    Any failure is raised to the caller.
    """

    api_url: str
    api_key: str
    max_length: int = 100
    temperature: float = 0.7

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "inputs": prompt,
            "parameters": {
                "max_length": self.max_length,
                "temperature": self.temperature,
                "do_sample": True,
                "return_full_text": False,
            },
        }

    def generate(self, prompt: str) -> CompletionResponse:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        client = _shared_http_client()
        response = client.post(self.api_url, headers=headers, json=self.build_payload(prompt))
        response.raise_for_status()
        return CompletionResponse(content=parse_generated_text(response.json()))


def parse_generated_text(data: Any) -> str:
    if not isinstance(data, list) or not data:
        raise CompletionError("expected a non-empty list")
    first = data[0]
    if not isinstance(first, dict):
        raise CompletionError("first element must be an object")
    if first.get("error"):
        raise CompletionError(f"endpoint error: {first['error']}")
    text = first.get("generated_text")
    if not isinstance(text, str) or not text.strip():
        raise CompletionError("generated_text missing or empty")
    return text.strip()
