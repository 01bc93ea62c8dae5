# -*- coding: utf-8 -*-

import pytest

from tests.test_utils import set_openai_mock_json
from uflow import config
from uflow.interpreter import LocalInterpreter
from uflow.parser.types import Intent, Language
from uflow.remote import GPTInterpreter, ProxyInterpreter, RemoteInterpreterError
from uflow.router import get_interpreter, interpret


@pytest.fixture
def mock_openai(mocker):
    return mocker.patch("uflow.remote.gpt_client.OpenAI")


def test_get_interpreter():
    assert isinstance(get_interpreter("local"), LocalInterpreter)
    assert isinstance(get_interpreter("gpt"), GPTInterpreter)
    assert isinstance(get_interpreter("proxy"), ProxyInterpreter)


def test_get_interpreter_unknown_mode():
    with pytest.raises(ValueError):
        get_interpreter("bogus")


def test_local_is_default(es_context):
    result = interpret("gasté 20k en uber", es_context)
    assert result.intent == Intent.CREATE
    assert result.structured.data.amount == 20000.0


def test_default_context_when_missing():
    result = interpret("hola")
    assert result.intent == Intent.QUERY
    assert result.lang == Language.from_string(config.DEFAULT_LANGUAGE)


def test_auto_without_key_uses_local(mock_openai, monkeypatch, es_context):
    monkeypatch.setattr(config, "GPT_ENABLED", False)
    result = interpret("recibí 500k", es_context, mode="auto")
    mock_openai.assert_not_called()
    assert result.structured.data.category == "Salary"


def test_auto_uses_model_when_enabled(mock_openai, monkeypatch, es_context):
    monkeypatch.setattr(config, "GPT_ENABLED", True)
    monkeypatch.setattr(config, "OPENAI_API_KEY", "sk-test")
    set_openai_mock_json(mock_openai, {"text": "¡Hola! ¿Qué registramos hoy?", "lang": "es", "intent": "query"})

    result = interpret("hola", es_context, mode="auto")

    assert result.text == "¡Hola! ¿Qué registramos hoy?"


def test_auto_falls_back_to_local(mock_openai, monkeypatch, es_context):
    monkeypatch.setattr(config, "GPT_ENABLED", True)
    monkeypatch.setattr(config, "OPENAI_API_KEY", "sk-test")
    mock_openai.return_value.chat.completions.create.side_effect = Exception("rate limited")

    result = interpret("gasté 20k en uber", es_context, mode="auto")

    assert result.intent == Intent.CREATE
    assert result.structured.data.category == "Transport"


def test_gpt_mode_propagates_errors(monkeypatch, es_context):
    monkeypatch.setattr(config, "OPENAI_API_KEY", "")
    with pytest.raises(RemoteInterpreterError):
        interpret("hola", es_context, mode="gpt")
