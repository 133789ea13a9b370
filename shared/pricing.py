"""Price text helpers for cart and checkout assertions."""

from __future__ import annotations

import re
from collections.abc import Iterable

from shared.test_data import CartLine

_PRICE_PATTERN = re.compile(r"(\d[\d,]*)")


def parse_price(text: str | None) -> int:
    """
    Extract the rupee amount from a price label.

    Args:
        text: Label as rendered by the shop, e.g. ``"Rs. 1,500"``.

    Returns:
        Amount as an integer.

    Raises:
        ValueError: If the label contains no amount.
    """
    match = _PRICE_PATTERN.search(text or "")
    if not match:
        raise ValueError(f"No price found in {text!r}")
    return int(match.group(1).replace(",", ""))


def expected_cart_total(lines: Iterable[CartLine]) -> int:
    """Sum of unit price times quantity over every cart line."""
    return sum(line.total for line in lines)
