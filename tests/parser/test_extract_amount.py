# -*- coding: utf-8 -*-
"""
Unit tests for extract_amount module.
"""

import pytest

from uflow.parser.extract_amount import extract_amount, find_amount, strip_amount
from uflow.parser.types import Language


class TestExtractAmount:
    """Tests for extract_amount function."""

    # === Plain and scaled amounts ===

    def test_plain_amount(self):
        """gasté 50000 en comida -> 50000"""
        assert extract_amount("gasté 50000 en comida", Language.ES) == 50000.0

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("gasté 300mil en comida", 300_000.0),
            ("gasté 300 mil en comida", 300_000.0),
            ("gasté 20k en uber", 20_000.0),
            ("gasté 20K en uber", 20_000.0),
            ("me pagaron 2 millones", 2_000_000.0),
            ("1 millón de pesos", 1_000_000.0),
            ("arriendo 1 millon", 1_000_000.0),
        ],
    )
    def test_spanish_scale_suffixes(self, text, expected):
        assert extract_amount(text, Language.ES) == expected

    def test_english_k_suffix(self):
        """spent 50k on food -> 50000"""
        assert extract_amount("spent 50k on food", Language.EN) == 50_000.0

    def test_decimal_with_m_suffix(self):
        """1.5M -> 1,500,000 in both languages"""
        assert extract_amount("received 1.5M", Language.EN) == 1_500_000.0
        assert extract_amount("recibí 1.5M", Language.ES) == 1_500_000.0

    def test_m_not_taken_from_following_word(self):
        """gasté 20 mangos -> 20, not 20 million"""
        assert extract_amount("gasté 20 mangos", Language.ES) == 20.0

    def test_first_numeric_token_wins(self):
        assert extract_amount("gasté 20k en uber y 5k en propina", Language.ES) == 20_000.0

    # === Separators by language ===

    def test_spanish_thousands_groups(self):
        """gasté 1.500.000 en arriendo -> 1500000"""
        assert extract_amount("gasté 1.500.000 en arriendo", Language.ES) == 1_500_000.0

    def test_spanish_dot_three_digits_is_thousands(self):
        assert extract_amount("gasté 1.500", Language.ES) == 1500.0

    def test_spanish_dot_two_digits_is_decimal(self):
        assert extract_amount("gasté 2.50", Language.ES) == 2.5

    def test_spanish_decimal_comma(self):
        assert extract_amount("gasté 15,5 dólares", Language.ES) == 15.5

    def test_spanish_comma_with_scale(self):
        assert extract_amount("me pagaron 1,5 millones", Language.ES) == 1_500_000.0

    def test_english_dot_is_decimal(self):
        assert extract_amount("spent 1.500 on coffee", Language.EN) == 1.5

    def test_english_comma_thousands(self):
        """1,500.75 -> 1500.75"""
        assert extract_amount("spent 1,500.75 on rent", Language.EN) == 1500.75

    # === Prefixes ===

    def test_dollar_prefix(self):
        assert extract_amount("spent $100 on shoes", Language.EN) == 100.0

    def test_code_prefix(self):
        assert extract_amount("usd 15 en taxi", Language.ES) == 15.0

    def test_dollar_prefix_spanish_grouping(self):
        assert extract_amount("almuerzo $20.000", Language.ES) == 20_000.0

    # === No amount ===

    def test_no_digits_returns_zero(self):
        assert extract_amount("gasté en uber", Language.ES) == 0.0

    def test_empty_returns_zero(self):
        assert extract_amount("", Language.ES) == 0.0

    def test_unparseable_number_returns_zero(self):
        assert extract_amount("1.2.3", Language.ES) == 0.0

    # === Relative-date phrases ===

    def test_hace_n_dias_not_taken_as_amount(self):
        assert extract_amount("hace 3 días gasté 20k en taxi", Language.ES) == 20_000.0

    def test_days_ago_not_taken_as_amount(self):
        assert extract_amount("2 days ago spent 15 usd on lunch", Language.EN) == 15.0

    def test_only_days_ago_means_no_amount(self):
        assert extract_amount("gasté en comida hace 2 dias", Language.ES) == 0.0


class TestStripAmount:
    """Tests for strip_amount and find_amount."""

    def test_removes_scaled_token(self):
        assert strip_amount("meta de ahorro 2 millones", Language.ES) == "meta de ahorro"

    def test_removes_prefixed_token(self):
        assert strip_amount("viaje a cartagena $500.000 meta", Language.ES) == "viaje a cartagena meta"

    def test_without_amount_returns_trimmed_text(self):
        assert strip_amount("  meta viaje ", Language.ES) == "meta viaje"

    def test_find_amount_groups(self):
        match = find_amount("spent usd 20k", Language.EN)
        assert match is not None
        assert match.group("prefix").lower() == "usd"
        assert match.group("number") == "20"
        assert match.group("scale") == "k"
