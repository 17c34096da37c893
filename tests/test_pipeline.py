import pytest

from deckbrief.brief import BriefPipeline, Stage, validate_request, DEFAULT_PERSONA
from deckbrief.brief.prompts import build_brief_prompt, build_summary_prompt, brief_sections
from deckbrief.errors import GENERIC_ERROR_MESSAGE, ValidationError

DECK = "Acme Corp is a SaaS startup selling invoicing software to dentists."
SUMMARY = "• one\n• two\n• three\n• four\n• five"
BRIEF = "Executive Summary: Acme looks promising. Market Opportunity Assessment: large."


@pytest.fixture()
def pipeline_with(make_generator):
    def _make(*providers):
        return BriefPipeline(make_generator(*providers))
    return _make


class TestValidation:
    @pytest.mark.parametrize("deck", [None, "", "   ", "\n\t", 42, ["text"], {"a": 1}])
    def test_invalid_deck_text_is_rejected(self, deck, pipeline_with, make_client):
        client = make_client("openai", [SUMMARY, BRIEF])
        status, resp = pipeline_with(client).handle({"deckText": deck})

        assert status == 400
        assert resp.success is False
        assert resp.error == "Missing or invalid deckText field"
        assert resp.summary is None and resp.brief is None
        assert client.prompts == []

    @pytest.mark.parametrize("body", [None, "deck", ["deck"]])
    def test_non_object_body_is_rejected(self, body, pipeline_with, make_client):
        client = make_client("openai")
        status, resp = pipeline_with(client).handle(body)
        assert status == 400
        assert client.prompts == []

    def test_missing_deck_text_key(self):
        with pytest.raises(ValidationError):
            validate_request({"vcPersona": "Sequoia partner"})

    @pytest.mark.parametrize("persona", [None, "", "   ", 7])
    def test_default_persona(self, persona):
        req = validate_request({"deckText": DECK, "vcPersona": persona})
        assert req.persona == DEFAULT_PERSONA == "VC investor"

    def test_persona_and_deck_are_trimmed(self):
        req = validate_request({"deckText": "  deck  ", "vcPersona": "  Sequoia partner "})
        assert req.deck_text == "deck"
        assert req.persona == "Sequoia partner"


class TestPrompts:
    def test_summary_prompt_embeds_deck(self):
        prompt = build_summary_prompt(DECK)
        assert DECK in prompt
        assert "exactly 5" in prompt
        assert prompt.count("• [Bullet point") == 5

    def test_brief_prompt_names_all_sections(self):
        prompt = build_brief_prompt(SUMMARY, "Sequoia partner")
        assert SUMMARY in prompt
        assert prompt.startswith("You are a Sequoia partner.")
        assert "specified VC persona: Sequoia partner." in prompt
        for i, name in enumerate(brief_sections(), start=1):
            assert f"{i}. {name}" in prompt
        assert brief_sections() == [
            "Executive Summary",
            "Market Opportunity Assessment",
            "Business Model Analysis",
            "Team Evaluation",
            "Risk Assessment",
            "Investment Recommendation",
        ]

    def test_braces_in_deck_text_survive(self):
        assert "{revenue}" in build_summary_prompt("ARR {revenue} grows")


class TestHandle:
    def test_round_trip(self, pipeline_with, make_client):
        client = make_client("openai", [SUMMARY, BRIEF])
        status, resp = pipeline_with(client).handle({"deckText": DECK, "vcPersona": "Sequoia partner"})

        assert status == 200
        assert resp.success is True
        assert resp.summary == SUMMARY
        assert resp.brief == BRIEF
        assert resp.provider == "openai"
        assert resp.error is None

        summary_prompt, brief_prompt = client.prompts
        assert DECK in summary_prompt
        # the brief is written from the summary's actual value
        assert SUMMARY in brief_prompt
        assert "Sequoia partner" in brief_prompt

    def test_no_persona_uses_default_in_brief_prompt(self, pipeline_with, make_client):
        client = make_client("openai", [SUMMARY, BRIEF])
        pipeline_with(client).handle({"deckText": DECK})
        assert "You are a VC investor." in client.prompts[1]

    def test_custom_default_persona(self, make_generator, make_client):
        client = make_client("openai", [SUMMARY, BRIEF])
        BriefPipeline(make_generator(client), default_persona="angel investor").handle({"deckText": DECK})
        assert "You are a angel investor." in client.prompts[1]

    def test_reports_secondary_provider(self, pipeline_with, make_client, call_log, provider_error):
        primary = make_client("openai", [provider_error("openai"), provider_error("openai")])
        secondary = make_client("gemini", [SUMMARY, BRIEF])
        status, resp = pipeline_with(primary, secondary).handle({"deckText": DECK})

        assert status == 200
        assert resp.provider == "gemini"
        # both prompts went to the primary first
        assert call_log == ["openai", "gemini", "openai", "gemini"]
        assert len(primary.prompts) == 2

    def test_provider_of_brief_call_is_reported(self, pipeline_with, make_client, provider_error):
        primary = make_client("openai", [SUMMARY, provider_error("openai")])
        secondary = make_client("gemini", [BRIEF])
        _, resp = pipeline_with(primary, secondary).handle({"deckText": DECK})
        assert resp.provider == "gemini"

    def test_no_providers_maps_to_server_error(self, pipeline_with):
        status, resp = pipeline_with().handle({"deckText": DECK})

        assert status == 500
        assert resp.success is False
        assert "No provider configured" in resp.error
        assert resp.summary is None and resp.brief is None and resp.provider is None

    def test_failed_brief_discards_summary(self, pipeline_with, make_client, caplog):
        client = make_client("openai", [SUMMARY, ""])
        with caplog.at_level("ERROR", logger="deckbrief.brief"):
            status, resp = pipeline_with(client).handle({"deckText": DECK})

        assert status == 500
        assert resp.error == "openai provider failed"
        assert resp.summary is None
        assert "failed at briefing" in caplog.text

    def test_failed_summary_is_logged_with_stage(self, pipeline_with, make_client, caplog):
        client = make_client("openai", [""])
        with caplog.at_level("ERROR", logger="deckbrief.brief"):
            pipeline_with(client).handle({"deckText": DECK})
        assert "failed at summarizing" in caplog.text
        assert len(client.prompts) == 1

    def test_unknown_error_is_masked(self, mocker):
        generator = mocker.Mock()
        generator.generate.side_effect = KeyError("secret internals")
        status, resp = BriefPipeline(generator).handle({"deckText": DECK})

        assert status == 500
        assert resp.error == GENERIC_ERROR_MESSAGE
        assert "secret" not in resp.error

    def test_rejection_is_logged(self, pipeline_with, caplog):
        with caplog.at_level("ERROR", logger="deckbrief.brief"):
            pipeline_with().handle({"deckText": ""})
        assert "rejected at validating" in caplog.text


class TestStages:
    def _stages(self, pipeline, body, mocker):
        spy = mocker.spy(pipeline, "_advance")
        pipeline.handle(body)
        return [c.args[0] for c in spy.call_args_list]

    def test_happy_path(self, pipeline_with, make_client, mocker):
        pipeline = pipeline_with(make_client("openai", [SUMMARY, BRIEF]))
        assert self._stages(pipeline, {"deckText": DECK}, mocker) == [
            Stage.VALIDATING,
            Stage.SUMMARIZING,
            Stage.BRIEFING,
            Stage.DONE,
        ]

    def test_rejected(self, pipeline_with, mocker):
        assert self._stages(pipeline_with(), {"deckText": " "}, mocker) == [Stage.VALIDATING, Stage.REJECTED]

    def test_failed_while_briefing(self, pipeline_with, make_client, mocker):
        pipeline = pipeline_with(make_client("openai", [SUMMARY, ""]))
        assert self._stages(pipeline, {"deckText": DECK}, mocker) == [
            Stage.VALIDATING,
            Stage.SUMMARIZING,
            Stage.BRIEFING,
            Stage.FAILED,
        ]
