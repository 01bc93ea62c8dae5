# -*- coding: utf-8 -*-
"""
Chat proxy client.

Talks to a chat proxy exposing ``/api/chat`` and ``/api/summarize`` (the
server holds the model credentials). Transport failures never raise: the
user gets a localized "service unreachable" reply with intent ``unknown``.
"""

import logging
from typing import List, Optional

import requests

from uflow import config
from uflow.interpreter import InterpretationResult, InterpretContext, Interpreter
from uflow.parser.types import Intent, Language
from uflow.remote.response import result_from_payload

logger = logging.getLogger(__name__)

_CONNECTION_ERROR = {
    Language.ES: "Error conectando con el servicio de IA. Asegúrate de que el servidor esté corriendo.",
    Language.EN: "Error connecting to AI service. Make sure the server is running.",
}

_EMPTY_REPLY = "No response from AI"


class ProxyInterpreter(Interpreter):
    """Remote-model engine behind an HTTP chat proxy."""

    name = "proxy"

    def __init__(self, url: Optional[str] = None, timeout: Optional[int] = None):
        self.url = url or config.ASSISTANT_PROXY_URL
        self.timeout = timeout or config.ASSISTANT_TIMEOUT

    def build_payload(self, utterance: str, context: InterpretContext) -> dict:
        ledger_view = context.ledger.to_context_dict(limit=10)
        payload = {
            "prompt": utterance,
            "context": {
                "currencyBase": ledger_view["currencyBase"],
                "language": context.default_language.value,
                "transactions": ledger_view["transactions"],
                "accounts": ledger_view["accounts"],
            },
            "messages": list(context.messages),
        }
        if context.previous_summary:
            payload["previousSummary"] = context.previous_summary
        if context.force_create:
            payload["forceCreate"] = True
        return payload

    def interpret(self, utterance: str, context: InterpretContext) -> InterpretationResult:
        try:
            response = requests.post(
                self.url,
                json=self.build_payload(utterance, context),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.Timeout:
            logger.warning(f"Chat proxy timeout after {self.timeout}s")
            return self._connection_error(context)
        except requests.RequestException as e:
            logger.error(f"Chat proxy request failed: {e}")
            return self._connection_error(context)
        except ValueError as e:
            logger.error(f"Chat proxy returned invalid JSON: {e}")
            return self._connection_error(context)

        if not isinstance(data, dict):
            return self._connection_error(context)

        data.setdefault("lang", context.default_language.value)
        data.setdefault("intent", Intent.UNKNOWN.value)
        if not data.get("text"):
            data["text"] = _EMPTY_REPLY
        return result_from_payload(data, context)

    @staticmethod
    def _connection_error(context: InterpretContext) -> InterpretationResult:
        lang = context.default_language
        return InterpretationResult(text=_CONNECTION_ERROR[lang], lang=lang, intent=Intent.UNKNOWN)


def fetch_summary(messages: List[dict], url: Optional[str] = None, timeout: Optional[int] = None) -> Optional[str]:
    """
    Ask the proxy for a conversation summary.

    Returns:
        Summary text, or None on any failure
    """
    try:
        response = requests.post(
            url or config.ASSISTANT_SUMMARY_URL,
            json={"messages": messages},
            timeout=timeout or config.ASSISTANT_TIMEOUT,
        )
        if not response.ok:
            logger.warning(f"Summary endpoint returned {response.status_code}")
            return None
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Summary generation failed: {e}")
        return None

    if not isinstance(data, dict):
        return None
    return data.get("summary") or None
