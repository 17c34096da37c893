# Request/response shapes for the brief pipeline.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


@dataclass
class GenerationRequest:
    """A validated request: trimmed deck text plus the persona to write as."""
    deck_text: str
    persona: str


class Stage(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUMMARIZING = "summarizing"
    BRIEFING = "briefing"
    DONE = "done"
    FAILED = "failed"
    REJECTED = "rejected"


class BriefResponse(BaseModel):
    success: bool
    summary: Optional[str] = None
    brief: Optional[str] = None
    provider: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, summary: str, brief: str, provider: str) -> "BriefResponse":
        return cls(success=True, summary=summary, brief=brief, provider=provider)

    @classmethod
    def fail(cls, error: str) -> "BriefResponse":
        return cls(success=False, error=error)


class Snapshot(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bullets: List[str] = Field(default_factory=list)
    investor_angle: str = Field(default="", alias="investorAngle")
