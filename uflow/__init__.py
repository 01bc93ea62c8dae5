# -*- coding: utf-8 -*-
"""
UFlow assistant core.

Rule-based interpreter for short Spanish/English personal-finance
utterances, plus a small analytics engine over a read-only ledger.
"""
