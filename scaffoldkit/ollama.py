"""Client for a local Ollama server: generation, chat and embeddings."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterator
from urllib.parse import urlsplit

import requests

MODEL = "gemma2"
DEFAULT_HOST = "http://localhost"
DEFAULT_PORT = 11434
EMBEDDING_LENGTH = 3584
KEEP_ALIVE = "30s"


@dataclass
class OllamaConfig:
    """Server endpoint and request timeout in seconds (``None`` waits forever)."""

    endpoint: str = ""
    timeout: float | None = None


class OllamaClient:
    """Talks to the Ollama HTTP API."""

    def __init__(self, config: OllamaConfig | None = None) -> None:
        config = config or OllamaConfig()
        endpoint = config.endpoint or f"{DEFAULT_HOST}:{DEFAULT_PORT}"
        urlsplit(endpoint)
        self.endpoint = endpoint.rstrip("/")
        self.timeout = config.timeout
        self._session = requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.endpoint}/api/{path}"

    def _stream(self, path: str, payload: dict[str, Any]) -> Iterator[dict[str, Any]]:
        with self._session.post(
            self._url(path), json=payload, stream=True, timeout=self.timeout
        ) as resp:
            for line in resp.iter_lines():
                if not line:
                    continue
                data = json.loads(line)
                if data.get("error"):
                    raise RuntimeError(data["error"])
                if resp.status_code >= 400:
                    raise RuntimeError(f"ollama: status {resp.status_code}")
                yield data
            if resp.status_code >= 400:
                raise RuntimeError(f"ollama: status {resp.status_code}")

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        resp = self._session.post(self._url(path), json=payload, timeout=self.timeout)
        if resp.status_code >= 400:
            try:
                message = resp.json().get("error")
            except ValueError:
                message = None
            raise RuntimeError(message or f"ollama: status {resp.status_code}")
        return resp.json()

    def start_chat(self, base_prompt: list[str]) -> "ChatSession":
        """Begin a chat whose history starts with the given system prompts."""
        messages = [{"role": "system", "content": prompt} for prompt in base_prompt]
        return ChatSession(self, MODEL, messages)

    def generate(self, prompt: str) -> str:
        payload = {
            "model": MODEL,
            "prompt": prompt,
            "stream": True,
            "keep_alive": KEEP_ALIVE,
        }
        return "".join(chunk.get("response", "") for chunk in self._stream("generate", payload))

    def embedding(self, prompt: str) -> list[float]:
        data = self._post("embeddings", {"model": MODEL, "prompt": prompt})
        return list(data.get("embedding") or [])


class ChatSession:
    """A running conversation; user messages accumulate in its history."""

    def __init__(self, client: OllamaClient, model: str,
                 messages: list[dict[str, str]], format: str = "") -> None:
        self.client = client
        self.model = model
        self.messages = messages
        self.format = format

    def send_message(self, message: str) -> str:
        self.messages.append({"role": "user", "content": message})
        payload = {
            "model": self.model,
            "messages": list(self.messages),
            "stream": True,
            "format": self.format,
            "keep_alive": KEEP_ALIVE,
        }
        return "".join(
            (chunk.get("message") or {}).get("content", "")
            for chunk in self.client._stream("chat", payload)
        )