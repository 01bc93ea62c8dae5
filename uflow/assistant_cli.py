# -*- coding: utf-8 -*-
"""UFlow assistant CLI.

Local entry for interpreting one utterance and printing the result as JSON,
for scripting and for checking rule changes without the app.

Examples:
    uflow-assistant interpret --text "gasté 20k en uber ayer"
    uflow-assistant interpret --text "how much did I spend on food" --lang en --ledger ledger.json
    uflow-assistant summarize --messages-json '[{"role": "user", "content": "..."}]'
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Any

from uflow import config
from uflow.interpreter import InterpretContext
from uflow.ledger import LedgerSnapshot
from uflow.parser.types import Currency, Language
from uflow.remote import RemoteInterpreterError, fetch_summary, summarize_conversation
from uflow.router import MODES, interpret


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")


def _load_ledger(path: str | None, base_currency: str) -> LedgerSnapshot:
    if not path:
        return LedgerSnapshot.empty(base_currency)
    with open(path, "r", encoding="utf-8") as f:
        return LedgerSnapshot.from_dict(json.load(f))


def _load_messages(raw: str | None) -> list[dict]:
    if not raw:
        return []
    messages = json.loads(raw)
    if not isinstance(messages, list):
        raise ValueError("messages must be a JSON list")
    return messages


def cmd_interpret(args: argparse.Namespace) -> int:
    try:
        ledger = _load_ledger(args.ledger, args.currency)
        messages = _load_messages(args.history_json)
        now = datetime.fromisoformat(args.now) if args.now else None
        context = InterpretContext(
            default_language=Language.from_string(args.lang),
            default_currency=Currency.from_string(args.currency),
            ledger=ledger,
            now=now,
            previous_summary=args.summary,
            messages=messages,
            force_create=bool(args.force_create),
        )
    except (OSError, ValueError, KeyError) as e:
        _print_json({"status": "error", "error": {"message": str(e), "reason": "bad_input"}})
        return 1

    try:
        result = interpret(args.text, context, mode=args.mode)
    except RemoteInterpreterError as e:
        _print_json({"status": "error", "error": {"message": str(e), "reason": "remote_unavailable"}})
        return 1

    _print_json({"status": "ok", "result": result.to_dict()})
    return 0


def cmd_summarize(args: argparse.Namespace) -> int:
    try:
        messages = _load_messages(args.messages_json)
    except ValueError as e:
        _print_json({"status": "error", "error": {"message": f"invalid messages_json: {e}", "reason": "bad_json"}})
        return 1

    if args.mode == "proxy":
        summary = fetch_summary(messages)
    else:
        summary = summarize_conversation(messages)

    _print_json({"status": "ok", "result": {"summary": summary}})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="uflow-assistant", description="UFlow finance assistant CLI")
    parser.add_argument("--verbose", action="store_true", help="Debug logging to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    it = sub.add_parser("interpret", help="Interpret one utterance and print the result")
    it.add_argument("--text", required=True)
    it.add_argument("--lang", default=config.DEFAULT_LANGUAGE, choices=[lang.value for lang in Language])
    it.add_argument("--currency", default=config.DEFAULT_CURRENCY, choices=[c.value for c in Currency])
    it.add_argument("--ledger", help="Path to a ledger JSON file (baseCurrency, transactions, accounts)")
    it.add_argument("--mode", default="local", choices=MODES)
    it.add_argument("--now", help="Reference time, ISO 8601 (default: now)")
    it.add_argument("--summary", help="Previous conversation summary (remote modes)")
    it.add_argument("--history-json", help="Conversation history as a JSON list (remote modes)")
    it.add_argument("--force-create", action="store_true", help="Quick-create mode (remote modes)")
    it.set_defaults(func=cmd_interpret)

    sm = sub.add_parser("summarize", help="Summarize a conversation")
    sm.add_argument("--messages-json", required=True)
    sm.add_argument("--mode", default="gpt", choices=("gpt", "proxy"))
    sm.set_defaults(func=cmd_summarize)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
