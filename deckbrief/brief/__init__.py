# Brief package: the summarize -> brief pipeline and the snapshot helpers.

from .pipeline import BriefPipeline, validate_request, DEFAULT_PERSONA
from .snapshot import build_snapshot, extract_bullets, investor_angle
from .types import BriefResponse, GenerationRequest, Snapshot, Stage

__all__ = [
    "BriefPipeline",
    "validate_request",
    "DEFAULT_PERSONA",
    "build_snapshot",
    "extract_bullets",
    "investor_angle",
    "BriefResponse",
    "GenerationRequest",
    "Snapshot",
    "Stage",
]
