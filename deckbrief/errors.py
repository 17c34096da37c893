# Error taxonomy shared by the generator and the request pipeline.

from typing import Optional

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class DeckBriefError(Exception):
    """Base class for errors whose message is safe to show to the caller."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else self.__class__.__name__


class ValidationError(DeckBriefError):
    """Malformed or missing request fields."""


class ProviderError(DeckBriefError):
    """A single provider call failed. Triggers fallback to the next provider."""

    def __init__(self, provider: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.provider} ({self.status_code}): {self.message}"
        return f"{self.provider}: {self.message}"


class GenerationError(DeckBriefError):
    """No configured provider produced usable content."""

