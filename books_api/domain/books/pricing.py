"""
Price parsing and formatting rules.

Prices travel over the wire as text and live in the domain as
fixed-point Decimals. Only plain ASCII decimals without leading
zeros are accepted, and they are rendered in fixed-point notation,
so every accepted text comes back exactly as sent.
"""

import re
from decimal import Decimal
from typing import Optional

from books_api.domain.books.errors import InvalidPriceError

PRICE_PATTERN_TEXT = r"^(0|[1-9][0-9]*)(\.[0-9]+)?$"
PRICE_PATTERN = re.compile(PRICE_PATTERN_TEXT)


def parse_price(raw: Optional[str]) -> Optional[Decimal]:
    """Parse wire text into a price.

    Args:
        raw: Price text such as "9.99". None or blank means absent.

    Returns:
        The price as a Decimal, or None when absent.

    Raises:
        InvalidPriceError: If the text is not a plain non-negative number.
    """
    if raw is None or not raw.strip():
        return None
    if not PRICE_PATTERN.fullmatch(raw):
        raise InvalidPriceError(raw)
    return Decimal(raw)


def format_price(value: Optional[Decimal]) -> Optional[str]:
    """Render a price in fixed-point notation, never exponent form."""
    if value is None:
        return None
    return format(value, "f")
