import pytest

from deckbrief.errors import ProviderError
from deckbrief.generate import TextGenerator, ModelParams


class ScriptedClient:
    """Test double: replays queued answers and records every prompt it saw."""

    def __init__(self, name, answers=None, model="fake-1"):
        self.name = name
        self.model = model
        self.answers = list(answers or [])
        self.prompts = []
        self.log = None

    def generate(self, messages, params):
        prompt = messages[-1].content
        self.prompts.append(prompt)
        if self.log is not None:
            self.log.append(self.name)
        answer = self.answers.pop(0) if self.answers else ""
        if isinstance(answer, Exception):
            raise answer
        return answer, {"engine": self.name, "model": self.model}


@pytest.fixture()
def call_log():
    return []


@pytest.fixture()
def make_client(call_log):
    def _make(name, answers=None):
        client = ScriptedClient(name, answers)
        client.log = call_log
        return client
    return _make


@pytest.fixture()
def make_generator():
    def _make(*providers):
        return TextGenerator(list(providers), ModelParams(temperature=0.7, max_tokens=2000))
    return _make


@pytest.fixture()
def provider_error():
    return lambda name: ProviderError(name, "boom", 503)
