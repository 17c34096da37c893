# TextGenerator: send one prompt to the configured providers in priority
# order and return the first usable answer.

from __future__ import annotations
from typing import List, Optional, Sequence
from .types import Message, ModelParams, GenerationResult, ModelClient
from ..errors import GenerationError, ProviderError
from ..logs import get_logger
from ..settings import Settings

logger = get_logger("deckbrief.generate")

NO_PROVIDER_MESSAGE = "No provider configured. Please set OPENAI_API_KEY or GEMINI_API_KEY."


class TextGenerator:
    def __init__(self, providers: Sequence[ModelClient], params: Optional[ModelParams] = None):
        self.providers: List[ModelClient] = list(providers)
        self.params = params or ModelParams(temperature=0.7, max_tokens=2000)

    def generate(self, prompt: str) -> GenerationResult:
        """Try each provider once, in order. The first non-empty answer wins.

        Provider failures (exceptions or empty content) are logged and the
        next provider is tried. Raises GenerationError when none succeeds.
        """
        if not self.providers:
            raise GenerationError(NO_PROVIDER_MESSAGE)

        messages = [Message(role="user", content=prompt)]
        last_error: Optional[ProviderError] = None
        for client in self.providers:
            try:
                text, meta = client.generate(messages, self.params)
                if not text or not text.strip():
                    raise ProviderError(client.name, "empty content")
            except ProviderError as exc:
                last_error = exc
            except Exception as exc:
                last_error = ProviderError(client.name, str(exc) or exc.__class__.__name__)
                last_error.__cause__ = exc
            else:
                return GenerationResult(
                    content=text,
                    provider=client.name,
                    model=(meta or {}).get("model") or getattr(client, "model", None),
                )
            logger.warning("provider %s failed: %s", client.name, last_error)

        raise GenerationError(f"{last_error.provider} provider failed") from last_error

    def available_providers(self) -> List[str]:
        return [f"{PROVIDER_LABELS.get(c.name, c.name)} ({c.model})" for c in self.providers]


PROVIDER_LABELS = {
    "openai": "OpenAI",
    "gemini": "Gemini",
    "ollama": "Ollama",
    "echo": "Echo",
}


def build_providers(cfg: Settings) -> List[ModelClient]:
    """Instantiate the provider clients enabled in cfg, primary first."""
    providers: List[ModelClient] = []
    if cfg.OPENAI_API_KEY:
        from .clients.openai_client import OpenAIClient
        providers.append(OpenAIClient(api_key=cfg.OPENAI_API_KEY, model=cfg.OPENAI_MODEL))
    if cfg.GEMINI_API_KEY:
        from .clients.gemini_client import GeminiClient
        providers.append(GeminiClient(api_key=cfg.GEMINI_API_KEY, model=cfg.GEMINI_MODEL))
    if cfg.USE_OLLAMA:
        from .clients.ollama_client import OllamaClient
        providers.append(OllamaClient(model=cfg.OLLAMA_MODEL, host=cfg.OLLAMA_HOST))
    if cfg.USE_ECHO:
        from .clients.echo_dev_client import EchoDevClient
        providers.append(EchoDevClient())
    return providers


def build_generator(cfg: Settings) -> TextGenerator:
    providers = build_providers(cfg)
    logger.info("providers configured: %s", [p.name for p in providers] or "none")
    return TextGenerator(
        providers=providers,
        params=ModelParams(temperature=cfg.TEMPERATURE, max_tokens=cfg.MAX_TOKENS),
    )
