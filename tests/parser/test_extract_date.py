# -*- coding: utf-8 -*-
"""
Unit tests for extract_date module.
"""

from datetime import timedelta

import pytest

from uflow.parser.extract_date import resolve_date


class TestResolveDate:

    @pytest.mark.parametrize(
        "text,offset",
        [
            ("gasté 20k en uber ayer", -1),
            ("spent 20 on lunch yesterday", -1),
            ("anoche pagué la cena", -1),
            ("antier fui al cine", -2),
            ("anteayer compré ropa", -2),
            ("the day before yesterday", -2),
            ("mañana pago el arriendo", 1),
            ("rent due tomorrow", 1),
        ],
    )
    def test_relative_tokens(self, bogota_now, text, offset):
        assert resolve_date(text, bogota_now) == bogota_now + timedelta(days=offset)

    def test_anteayer_is_not_read_as_ayer(self, bogota_now):
        assert resolve_date("anteayer", bogota_now).day == 10

    def test_case_insensitive(self, bogota_now):
        assert resolve_date("AYER", bogota_now) == bogota_now - timedelta(days=1)

    def test_hace_n_dias(self, bogota_now):
        assert resolve_date("hace 3 días gasté 20k", bogota_now) == bogota_now - timedelta(days=3)
        assert resolve_date("hace 1 dia", bogota_now) == bogota_now - timedelta(days=1)

    def test_n_days_ago(self, bogota_now):
        assert resolve_date("spent 15 usd 5 days ago", bogota_now) == bogota_now - timedelta(days=5)

    def test_first_rule_only(self, bogota_now):
        """'ayer' is checked before 'mañana'; offsets do not accumulate"""
        assert resolve_date("ayer dije que mañana", bogota_now) == bogota_now - timedelta(days=1)

    def test_no_token_returns_now(self, bogota_now):
        assert resolve_date("gasté 20k en uber", bogota_now) == bogota_now
        assert resolve_date("", bogota_now) == bogota_now

    def test_weekday_names_not_resolved(self, bogota_now):
        assert resolve_date("el domingo gasté 20k", bogota_now) == bogota_now

    def test_time_of_day_preserved(self, bogota_now):
        resolved = resolve_date("ayer", bogota_now)
        assert (resolved.hour, resolved.minute) == (15, 30)
        assert resolved.tzinfo == bogota_now.tzinfo
