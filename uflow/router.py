# -*- coding: utf-8 -*-
"""
Engine Router

Explicit entrypoints for the local rule engine and the remote-model engines.
``auto`` uses the model when an API key is configured and falls back to the
local engine when the model call fails.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from uflow import config
from uflow.interpreter import InterpretationResult, InterpretContext, Interpreter, LocalInterpreter
from uflow.parser.types import Currency, Language
from uflow.remote import GPTInterpreter, ProxyInterpreter, RemoteInterpreterError

logger = logging.getLogger(__name__)

Mode = Literal["auto", "local", "gpt", "proxy"]

MODES: tuple[str, ...] = ("auto", "local", "gpt", "proxy")


def default_context() -> InterpretContext:
    """Context built from the configured defaults, with an empty ledger."""
    return InterpretContext(
        default_language=Language.from_string(config.DEFAULT_LANGUAGE),
        default_currency=Currency.from_string(config.DEFAULT_CURRENCY),
    )


def get_interpreter(mode: Mode) -> Interpreter:
    if mode == "gpt":
        return GPTInterpreter()
    if mode == "proxy":
        return ProxyInterpreter()
    if mode == "local":
        return LocalInterpreter()
    raise ValueError(f"Unknown mode: {mode}")


def interpret(
    utterance: str,
    context: Optional[InterpretContext] = None,
    *,
    mode: Mode = "local",
) -> InterpretationResult:
    """
    Route an utterance to the selected engine.

    Raises:
        RemoteInterpreterError: only in ``gpt`` mode, when the model call fails
    """
    context = context or default_context()

    if mode != "auto":
        return get_interpreter(mode).interpret(utterance, context)

    if not config.GPT_ENABLED:
        return LocalInterpreter().interpret(utterance, context)

    try:
        return GPTInterpreter().interpret(utterance, context)
    except RemoteInterpreterError as e:
        logger.warning(f"Model unavailable ({e}), falling back to local engine")
        return LocalInterpreter().interpret(utterance, context)
