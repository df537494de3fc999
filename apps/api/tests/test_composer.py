"""Tests for the prompt composer: template embedding, response parsing, error wrapping."""

import pytest

from promptlab.providers import ChatRateLimitError, ChatServiceError
from promptlab.services import (
    PromptComposer,
    PromptGenerationError,
    UNKNOWN_ERROR_MESSAGE,
    parse_framework_response,
)

from .conftest import SCENARIO_1_RESPONSE, FakeChatProvider


class TestParseFrameworkResponse:
    def test_marker_line_becomes_justification(self):
        parsed = parse_framework_response("**Framework-Wahl:** X\nT – Body line\nmore")
        assert parsed.justification == "X"
        assert parsed.body == "T – Body line\nmore"

    def test_justification_and_body_are_trimmed(self):
        parsed = parse_framework_response("**Framework-Wahl:**   Weil es passt.   \n\n  C – Kontext  \n\n")
        assert parsed.justification == "Weil es passt."
        assert parsed.body == "C – Kontext"

    def test_no_marker_keeps_whole_trimmed_response(self):
        parsed = parse_framework_response("  Hier ist Ihr Prompt.\n")
        assert parsed.justification == ""
        assert parsed.body == "Hier ist Ihr Prompt."

    def test_marker_not_at_start_is_ignored(self):
        raw = "Vorweg.\n**Framework-Wahl:** TCREI"
        parsed = parse_framework_response(raw)
        assert parsed.justification == ""
        assert parsed.body == raw

    def test_marker_only_captures_first_line(self):
        parsed = parse_framework_response("**Framework-Wahl:**\nT – Aufgabe")
        assert parsed.justification == ""
        assert parsed.body == "T – Aufgabe"

    def test_reparsing_body_is_noop(self):
        first = parse_framework_response(SCENARIO_1_RESPONSE)
        second = parse_framework_response(first.body)
        assert second.justification == ""
        assert second.body == first.body

    def test_empty_response(self):
        parsed = parse_framework_response("")
        assert parsed.justification == ""
        assert parsed.body == ""


class TestPromptComposer:
    @pytest.mark.asyncio
    async def test_scenario_marketing_email(self, composer, fake_provider):
        composed = await composer.compose("Erstelle eine Marketing-E-Mail")

        assert composed.raw == SCENARIO_1_RESPONSE
        assert composed.justification == "CLEAR passt, da die Aufgabe einfach ist."
        assert composed.body == "C – Kontext: ...\nL – Länge: 100 Wörter"
        assert len(fake_provider.prompts) == 1

    @pytest.mark.asyncio
    async def test_task_is_embedded_verbatim(self, composer, fake_provider):
        task = 'Schreibe "etwas" mit {Klammern} und\nZeilenumbruch'
        await composer.compose(task)
        assert f'Aufgabenbeschreibung des Benutzers: "{task}"' in fake_provider.prompts[0]

    @pytest.mark.asyncio
    async def test_plain_answer_without_marker(self):
        composer = PromptComposer(FakeChatProvider(response="Hier ist Ihr Prompt."))
        composed = await composer.compose("Irgendwas")
        assert composed.justification == ""
        assert composed.body == "Hier ist Ihr Prompt."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("task", ["", "   ", "\n\t"])
    async def test_blank_task_sends_nothing(self, composer, fake_provider, task):
        with pytest.raises(ValueError):
            await composer.compose(task)
        assert fake_provider.prompts == []

    @pytest.mark.asyncio
    async def test_provider_error_message_is_surfaced(self):
        composer = PromptComposer(FakeChatProvider(error=ChatServiceError("quota exceeded")))
        with pytest.raises(PromptGenerationError) as exc_info:
            await composer.compose("Erstelle eine Marketing-E-Mail")
        assert exc_info.value.message == "Fehler bei der Kommunikation mit der KI: quota exceeded"
        assert exc_info.value.rate_limited is False
        assert isinstance(exc_info.value.__cause__, ChatServiceError)

    @pytest.mark.asyncio
    async def test_provider_error_without_message_uses_fallback(self):
        composer = PromptComposer(FakeChatProvider(error=ChatServiceError()))
        with pytest.raises(PromptGenerationError) as exc_info:
            await composer.compose("Task")
        assert exc_info.value.message == UNKNOWN_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_rate_limit_is_flagged(self):
        composer = PromptComposer(FakeChatProvider(error=ChatRateLimitError("Too many requests")))
        with pytest.raises(PromptGenerationError) as exc_info:
            await composer.compose("Task")
        assert exc_info.value.rate_limited is True
        assert exc_info.value.message.endswith(": Too many requests")

    def test_model_comes_from_provider(self, composer):
        assert composer.model == "fake-model"

    @pytest.mark.asyncio
    async def test_unexpected_provider_exception_is_surfaced(self):
        composer = PromptComposer(FakeChatProvider(error=RuntimeError("quota exceeded")))
        with pytest.raises(PromptGenerationError) as exc_info:
            await composer.compose("Erstelle eine Marketing-E-Mail")
        assert exc_info.value.message == "Fehler bei der Kommunikation mit der KI: quota exceeded"
        assert exc_info.value.rate_limited is False
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_leading_newline_keeps_raw_and_skips_marker(self):
        raw = "\n**Framework-Wahl:** X\nT – a\n"
        composed = await PromptComposer(FakeChatProvider(response=raw)).compose("Task")
        assert composed.raw == raw
        assert composed.justification == ""
        assert composed.body == "**Framework-Wahl:** X\nT – a"
