# Client for the OpenAI Chat Completions API.

from typing import List, Tuple, Dict, Any, Optional
from openai import OpenAI, OpenAIError, APIStatusError
from ..types import Message, ModelParams
from ...errors import ProviderError


class OpenAIClient:
    name = "openai"

    def __init__(self, api_key: Optional[str] = None, model: str = "gpt-4o-mini", client: Optional[OpenAI] = None):
        self.model = model
        self.client = client or OpenAI(api_key=api_key)

    def set_model(self, model: str):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=formatted,
                temperature=params.temperature if params.temperature is not None else 0.7,
                max_tokens=params.max_tokens or 2000,
            )
        except APIStatusError as exc:
            raise ProviderError(self.name, getattr(exc, "message", str(exc)), exc.status_code) from exc
        except OpenAIError as exc:
            raise ProviderError(self.name, str(exc)) from exc

        choice = resp.choices[0] if resp.choices else None
        content = choice.message.content if choice and choice.message else None
        if not content or not content.strip():
            raise ProviderError(self.name, "No content returned from OpenAI")
        meta = {"engine": "openai", "model": self.model}
        return content.strip(), meta
