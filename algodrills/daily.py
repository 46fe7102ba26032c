"""Daily practice problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_AGE_SLICE = slice(11, 13)
_SENIOR_AGE = 60


def count_senior_citizens(details: Iterable[str]) -> int:
    """Count passenger records whose age field (characters 11-12) exceeds 60."""
    count = 0
    for record in details:
        age = record[_AGE_SLICE]
        if len(age) != 2 or not age.isdigit():
            raise ValueError(f"record has no age field: {record!r}")
        if int(age) > _SENIOR_AGE:
            count += 1
    return count


def same_elements(target: Sequence[int], values: Sequence[int]) -> bool:
    """Return True when both sequences hold the same elements in any order."""
    return sorted(target) == sorted(values)