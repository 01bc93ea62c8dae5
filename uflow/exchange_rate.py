"""
Currency Converter Module

Converts amounts between the three supported currencies using fixed rates
expressed as COP per unit. Conversion goes through COP:
    amount * rate[from] / rate[to]
"""

import logging
from typing import Dict, Optional, Union

from uflow import config
from uflow.parser.types import Currency

logger = logging.getLogger(__name__)

CurrencyLike = Union[Currency, str]


class UnsupportedCurrencyError(ValueError):
    """Raised for currency codes outside the fixed set."""

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"Unsupported currency: {currency}")


class CurrencyConverter:
    """Fixed-rate converter over {COP, USD, EUR}"""

    # Pre-stored rates (COP per unit)
    DEFAULT_RATES = {
        "COP": 1.0,
        "USD": config.FX_RATE_USD,
        "EUR": config.FX_RATE_EUR,
    }

    def __init__(self, rates: Optional[Dict[str, float]] = None):
        """
        Initialize converter

        Args:
            rates: Optional COP-per-unit table overriding the configured rates
        """
        self.rates = dict(self.DEFAULT_RATES)
        if rates:
            self.rates.update({code.upper(): float(rate) for code, rate in rates.items()})

    def _code(self, currency: CurrencyLike) -> str:
        code = currency.value if isinstance(currency, Currency) else str(currency).upper()
        if code not in self.rates:
            raise UnsupportedCurrencyError(code)
        return code

    def get_rate(self, currency: CurrencyLike) -> float:
        """COP per one unit of ``currency``."""
        return self.rates[self._code(currency)]

    def convert(self, amount: float, from_currency: CurrencyLike, to_currency: CurrencyLike) -> float:
        """
        Convert ``amount`` from one currency to another.

        Examples:
            >>> CurrencyConverter().convert(10, "USD", "COP")
            42000.0
            >>> CurrencyConverter().convert(42000, "COP", "USD")
            10.0
        """
        source = self._code(from_currency)
        target = self._code(to_currency)
        if source == target:
            return amount

        amount_in_cop = amount * self.rates[source]
        if target == "COP":
            return amount_in_cop
        return amount_in_cop / self.rates[target]
