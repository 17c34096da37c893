# Client for Google Gemini through the google-genai SDK.

from typing import List, Tuple, Dict, Any, Optional
from google import genai
from google.genai import errors, types
from ..types import Message, ModelParams, last_user_content
from ...errors import ProviderError


class GeminiClient:
    name = "gemini"

    def __init__(self, api_key: Optional[str] = None, model: str = "gemini-1.5-flash", client: Optional[genai.Client] = None):
        self.model = model
        self.client = client or genai.Client(api_key=api_key)

    def set_model(self, model: str):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        # Gemini takes a single prompt; only the latest user turn is sent.
        prompt = last_user_content(messages)
        config = types.GenerateContentConfig(
            temperature=params.temperature,
            max_output_tokens=params.max_tokens,
        )
        try:
            resp = self.client.models.generate_content(model=self.model, contents=prompt, config=config)
        except errors.APIError as exc:
            raise ProviderError(self.name, exc.message or str(exc), exc.code) from exc

        text = (resp.text or "").strip()
        if not text:
            raise ProviderError(self.name, "No content returned from Gemini")
        return text, {"engine": "gemini", "model": self.model}
