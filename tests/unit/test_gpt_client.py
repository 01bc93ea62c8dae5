# -*- coding: utf-8 -*-
"""
Test OpenAI-backed interpreter

All OpenAI calls are mocked with pytest-mock.
"""

import pytest

from tests.test_utils import set_openai_mock_content, set_openai_mock_json
from uflow.parser.types import Intent
from uflow.remote.gpt_client import (
    HISTORY_LIMIT,
    GPTInterpreter,
    RemoteInterpreterError,
    build_messages,
    summarize_conversation,
)

CREATE_REPLY = {
    "text": "Listo, registré $20.000 en Transport.",
    "lang": "es",
    "intent": "create",
    "structured": {
        "type": "transaction",
        "data": {"type": "expense", "amount": 20000, "currency": "COP", "category": "Transport",
                 "note": "uber", "date": "2025-03-11T12:00:00.000Z"},
    },
}


@pytest.fixture
def mock_openai(mocker):
    return mocker.patch("uflow.remote.gpt_client.OpenAI")


class TestBuildMessages:

    def test_system_prompt_first_utterance_last(self, es_context):
        messages = build_messages("gasté 20k en uber", es_context)
        assert messages[0]["role"] == "system"
        assert "Hoy es 2025-03-12 (miércoles)" in messages[0]["content"]
        assert messages[-1] == {"role": "user", "content": "gasté 20k en uber"}

    def test_history_limited_and_filtered(self, es_context):
        es_context.messages = [{"role": "user", "content": f"m{i}"} for i in range(15)]
        es_context.messages.append({"role": "system", "content": "ignored"})

        messages = build_messages("hola", es_context)

        history = messages[1:-1]
        assert len(history) == HISTORY_LIMIT - 1
        assert history[0]["content"] == "m6"
        assert all(m["role"] != "system" for m in history)

    def test_previous_summary_in_prompt(self, es_context):
        es_context.previous_summary = "El usuario ahorra para un viaje."
        messages = build_messages("hola", es_context)
        assert "El usuario ahorra para un viaje." in messages[0]["content"]

    def test_force_create_prompt(self, es_context):
        es_context.force_create = True
        messages = build_messages("uber 20k", es_context)
        assert "MODO CREACIÓN RÁPIDA" in messages[0]["content"]


class TestGPTInterpreter:

    def test_interpret_create(self, mock_openai, es_context):
        client = set_openai_mock_json(mock_openai, CREATE_REPLY)

        result = GPTInterpreter(api_key="sk-test", model="gpt-test").interpret("gasté 20k en uber", es_context)

        assert result.intent == Intent.CREATE
        assert result.structured.data.amount == 20000.0
        mock_openai.assert_called_once_with(api_key="sk-test")
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["response_format"]["type"] == "json_schema"
        assert kwargs["response_format"]["json_schema"]["name"] == "interpretation_response"

    def test_interpret_plain_text_reply(self, mock_openai, es_context):
        set_openai_mock_content(mock_openai, "Claro, te ayudo con tu presupuesto.")

        result = GPTInterpreter(api_key="sk-test").interpret("ayúdame", es_context)

        assert result.intent == Intent.QUERY
        assert result.text == "Claro, te ayudo con tu presupuesto."

    def test_missing_api_key(self, monkeypatch, es_context):
        monkeypatch.setattr("uflow.config.OPENAI_API_KEY", "")
        with pytest.raises(RemoteInterpreterError):
            GPTInterpreter().interpret("hola", es_context)

    def test_api_failure(self, mock_openai, es_context):
        mock_openai.return_value.chat.completions.create.side_effect = Exception("API Error")
        with pytest.raises(RemoteInterpreterError, match="API Error"):
            GPTInterpreter(api_key="sk-test").interpret("hola", es_context)


class TestSummarizeConversation:

    MESSAGES = [
        {"role": "user", "content": "quiero ahorrar para un viaje"},
        {"role": "assistant", "content": "¡Buena idea! ¿Cuánto necesitas?"},
    ]

    def test_summary(self, mock_openai):
        client = set_openai_mock_content(mock_openai, "  El usuario ahorra para un viaje.  ")

        summary = summarize_conversation(self.MESSAGES, api_key="sk-test")

        assert summary == "El usuario ahorra para un viaje."
        sent = client.chat.completions.create.call_args.kwargs["messages"]
        assert sent[1]["content"].startswith("Usuario: quiero ahorrar")

    def test_too_few_messages(self, mock_openai):
        assert summarize_conversation(self.MESSAGES[:1], api_key="sk-test") is None
        mock_openai.assert_not_called()

    def test_failure_returns_none(self, mock_openai):
        mock_openai.return_value.chat.completions.create.side_effect = Exception("timeout")
        assert summarize_conversation(self.MESSAGES, api_key="sk-test") is None

    def test_missing_key_returns_none(self, monkeypatch):
        monkeypatch.setattr("uflow.config.OPENAI_API_KEY", "")
        assert summarize_conversation(self.MESSAGES) is None
