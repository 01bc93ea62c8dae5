# -*- coding: utf-8 -*-
"""
Remote-model engines (Phase 2)

Same ``Interpreter`` contract as the local rule engine:
- GPTInterpreter: OpenAI chat completions
- ProxyInterpreter: HTTP chat proxy
"""

from .gpt_client import GPTInterpreter, RemoteInterpreterError, summarize_conversation
from .proxy_client import ProxyInterpreter, fetch_summary
from .response import parse_model_response

__all__ = [
    "GPTInterpreter",
    "RemoteInterpreterError",
    "summarize_conversation",
    "ProxyInterpreter",
    "fetch_summary",
    "parse_model_response",
]
