# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import TextGenerator, build_generator, build_providers
from .types import Message, GenerationResult, ModelParams
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "TextGenerator",
    "build_generator",
    "build_providers",
    "Message",
    "GenerationResult",
    "ModelParams",
    "EchoDevClient",
]
