# BriefPipeline: validate a request, summarize the deck, then write the
# VC brief from that summary. Errors are mapped to (status, BriefResponse).

from __future__ import annotations
from typing import Any, Tuple

from .prompts import build_summary_prompt, build_brief_prompt
from .types import BriefResponse, GenerationRequest, Stage
from ..errors import ValidationError, DeckBriefError, GENERIC_ERROR_MESSAGE
from ..generate.generator import TextGenerator
from ..logs import get_logger

logger = get_logger("deckbrief.brief")

DEFAULT_PERSONA = "VC investor"


def validate_request(body: Any, default_persona: str = DEFAULT_PERSONA) -> GenerationRequest:
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")

    deck_text = body.get("deckText")
    if not isinstance(deck_text, str) or not deck_text.strip():
        raise ValidationError("Missing or invalid deckText field")

    persona = body.get("vcPersona")
    if isinstance(persona, str) and persona.strip():
        persona = persona.strip()
    else:
        persona = default_persona

    return GenerationRequest(deck_text=deck_text.strip(), persona=persona)


class BriefPipeline:
    def __init__(self, generator: TextGenerator, default_persona: str = DEFAULT_PERSONA):
        self.generator = generator
        self.default_persona = default_persona

    def handle(self, body: Any) -> Tuple[int, BriefResponse]:
        """Run one request end to end.

        Returns 200 with summary and brief, 400 when the body is rejected,
        500 when generation fails anywhere.
        """
        stage = Stage.IDLE
        try:
            stage = self._advance(Stage.VALIDATING)
            req = validate_request(body, self.default_persona)
        except ValidationError as exc:
            logger.error("request rejected at %s: %s", stage.value, exc.message)
            self._advance(Stage.REJECTED)
            return 400, BriefResponse.fail(exc.message)

        try:
            stage = self._advance(Stage.SUMMARIZING)
            summary = self.generator.generate(build_summary_prompt(req.deck_text))

            stage = self._advance(Stage.BRIEFING)
            brief = self.generator.generate(build_brief_prompt(summary.content, req.persona))
        except DeckBriefError as exc:
            logger.error("request failed at %s: %s", stage.value, exc.message)
            self._advance(Stage.FAILED)
            return 500, BriefResponse.fail(exc.message)
        except Exception:
            logger.exception("request failed at %s with an unexpected error", stage.value)
            self._advance(Stage.FAILED)
            return 500, BriefResponse.fail(GENERIC_ERROR_MESSAGE)

        self._advance(Stage.DONE)
        return 200, BriefResponse.ok(summary=summary.content, brief=brief.content, provider=brief.provider)

    def _advance(self, stage: Stage) -> Stage:
        logger.debug("stage -> %s", stage.value)
        return stage
