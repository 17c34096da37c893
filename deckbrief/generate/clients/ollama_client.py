# Client for Ollama local inference.

import requests
from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams
from ...errors import ProviderError


class OllamaClient:
    name = "ollama"

    def __init__(self, model: str = "mistral:7b-instruct", host: str = "http://localhost:11434", timeout: float = 180):
        self.model = model
        self.host = host.rstrip("/")
        self.timeout = timeout

    def set_model(self, model: str):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        prompt = self._compose_prompt(messages)
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": float(params.temperature if params.temperature is not None else 0.7),
                "num_predict": int(params.max_tokens or 2000),
            },
        }
        url = f"{self.host}/api/generate"
        try:
            resp = requests.post(url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.HTTPError as exc:
            raise ProviderError(self.name, str(exc), exc.response.status_code if exc.response is not None else None) from exc
        except (requests.RequestException, ValueError) as exc:
            raise ProviderError(self.name, str(exc)) from exc

        text = (data.get("response") or "").strip()
        if not text:
            raise ProviderError(self.name, "No content returned from Ollama")
        return text, {"engine": "ollama", "model": self.model}

    def _compose_prompt(self, messages: List[Message]) -> str:
        # a lone user turn goes through verbatim
        if len(messages) == 1 and messages[0].role == "user":
            return messages[0].content
        parts = []
        for m in messages:
            parts.append(f"{m.role.upper()}:\n{m.content.strip()}\n")
        return "\n".join(parts)
