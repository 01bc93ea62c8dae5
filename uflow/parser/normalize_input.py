# -*- coding: utf-8 -*-
"""Utterance normalization.

Conservative: only whitespace is touched. Keyword matching lower-cases on
its own, and amount extraction needs the original separators.
"""

from __future__ import annotations

import re


def normalize_utterance(text: str | None) -> str:
    s = text or ""

    # Collapse whitespace runs (newlines and non-breaking spaces included)
    s = re.sub(r"\s+", " ", s)

    return s.strip()
