"""Assessment drills: tax totals, unique values and a shift cipher."""

from __future__ import annotations

from collections.abc import Iterable

_TAX_FREE_LIMIT = 1000
_TAX_RATE = 0.1
_SHIFT = 3


def total_tax(amounts: Iterable[int]) -> int:
    """Total 10% tax on the part of each amount above 1000, truncated as it accrues."""
    total = 0
    for amount in amounts:
        if amount > _TAX_FREE_LIMIT:
            total = int(total + (amount - _TAX_FREE_LIMIT) * _TAX_RATE)
    return total


def unique_sorted(values: Iterable[int]) -> list[int]:
    """Return the distinct values in ascending order."""
    return sorted(set(values))


def shift_encrypt(text: str) -> str:
    """Shift every character three code points up."""
    return "".join(chr(ord(char) + _SHIFT) for char in text)