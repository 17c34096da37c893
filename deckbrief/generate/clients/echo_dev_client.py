# Dummy model client for local dev and testing without API calls.

from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams, last_user_content


class EchoDevClient:
    name = "echo"

    def __init__(self):
        self.model = "echo-dev"

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        text = f"[ECHO RESPONSE]\n{last_user_content(messages) or '(no user input)'}"
        meta = {"engine": "echo", "model": self.model, "temp": params.temperature, "max_tokens": params.max_tokens}
        return text, meta
