# -*- coding: utf-8 -*-
"""
OpenAI-backed interpreter.

Same contract as the local engine, for free-form conversation. Sends the
system prompt, the last messages of the conversation and the utterance, and
parses the JSON reply with the same guarantees as local results.
"""

import logging
from typing import Optional

from openai import OpenAI

from uflow import config
from uflow.interpreter import InterpretationResult, InterpretContext, Interpreter
from uflow.remote.prompts import SUMMARY_PROMPT, build_system_prompt, get_date_info
from uflow.remote.response import parse_model_response
from uflow.remote.schemas import INTERPRETATION_RESPONSE_SCHEMA

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 10


class RemoteInterpreterError(Exception):
    """Raised when the model cannot be reached or its reply cannot be used."""


def build_messages(utterance: str, context: InterpretContext) -> list[dict]:
    """
    Build the chat messages for one call.

    Only ``user``/``assistant`` history entries are forwarded, last
    ``HISTORY_LIMIT`` of them.
    """
    date_info = get_date_info(context.reference_time())
    system_prompt = build_system_prompt(
        date_info,
        previous_summary=context.previous_summary,
        force_create=context.force_create,
    )

    messages = [{"role": "system", "content": system_prompt}]
    for msg in context.messages[-HISTORY_LIMIT:]:
        role = msg.get("role")
        if role in ("user", "assistant"):
            messages.append({"role": role, "content": str(msg.get("content") or "")})
    messages.append({"role": "user", "content": utterance})
    return messages


class GPTInterpreter(Interpreter):
    """Remote-model engine over OpenAI chat completions."""

    name = "gpt"

    def __init__(self, *, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or config.OPENAI_API_KEY
        self.model = model or config.GPT_MODEL

    def interpret(self, utterance: str, context: InterpretContext) -> InterpretationResult:
        """
        Interpret through the model.

        Raises:
            RemoteInterpreterError: API key missing or API call failed
        """
        if not self.api_key:
            raise RemoteInterpreterError("OPENAI_API_KEY is not set")

        client = OpenAI(api_key=self.api_key)
        messages = build_messages(utterance, context)
        logger.debug(f"Conversation history length: {len(messages) - 1}")

        try:
            completion = client.chat.completions.create(
                model=self.model,
                messages=messages,
                response_format={
                    "type": "json_schema",
                    "json_schema": INTERPRETATION_RESPONSE_SCHEMA,
                },
            )
            response_text = completion.choices[0].message.content
        except Exception as e:
            logger.error(f"GPT interpretation failed: {e}")
            raise RemoteInterpreterError(str(e)) from e

        logger.debug(f"GPT response: {response_text}")
        return parse_model_response(response_text or "", context)


def summarize_conversation(
    messages: list[dict],
    *,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> Optional[str]:
    """
    Summarize a conversation for the next session's ``previous_summary``.

    Args:
        messages: [{"role": "user"|"assistant", "content": str}, ...]

    Returns:
        Summary text, or None with fewer than 2 messages or on failure
    """
    if not messages or len(messages) < 2:
        return None

    key = api_key or config.OPENAI_API_KEY
    if not key:
        logger.warning("OPENAI_API_KEY is not set, skipping summary")
        return None

    conversation_text = "\n".join(
        f"{'Usuario' if m.get('role') == 'user' else 'Asistente'}: {m.get('content', '')}"
        for m in messages
    )

    try:
        client = OpenAI(api_key=key)
        completion = client.chat.completions.create(
            model=model or config.GPT_MODEL,
            messages=[
                {"role": "system", "content": SUMMARY_PROMPT},
                {"role": "user", "content": conversation_text},
            ],
        )
        summary = (completion.choices[0].message.content or "").strip()
    except Exception as e:
        logger.error(f"Summary generation failed: {e}")
        return None

    logger.info("Generated conversation summary")
    return summary or None
