# Typed dataclasses shared across the generator and its clients.

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple, Dict, Any


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass(frozen=True)
class GenerationResult:
    """Content produced by one provider for one prompt."""
    content: str
    provider: str
    model: Optional[str] = None


class ModelClient(Protocol):
    name: str
    model: str

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        ...


def last_user_content(messages: List[Message]) -> str:
    user_inputs = [m.content for m in messages if m.role == "user"]
    return user_inputs[-1] if user_inputs else ""
