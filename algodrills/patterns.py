"""Text patterns of stars, digits and letters, returned as newline-terminated rows."""

from __future__ import annotations

from collections.abc import Iterable


def _rows(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def pattern10(n: int) -> str:
    """A star triangle growing to ``n`` and shrinking back."""
    return _rows("*" * min(row, 2 * n - row) for row in range(1, 2 * n))


def pattern11(n: int) -> str:
    """A triangle of alternating 1s and 0s; even rows start with 1."""
    return _rows(
        "".join(str((row + col + 1) % 2) for col in range(row + 1)) for row in range(n)
    )


def pattern12(n: int) -> str:
    """Rising and falling digits separated by a narrowing gap."""
    return _rows(
        "".join(str(col) for col in range(1, row + 1))
        + " " * (2 * n - 2 * row)
        + "".join(str(col) for col in range(row, 0, -1))
        for row in range(1, n + 1)
    )


def pattern13(n: int) -> str:
    """Floyd's triangle: consecutive numbers, each followed by a space."""
    lines = []
    count = 0
    for row in range(1, n + 1):
        lines.append("".join(f"{count + col} " for col in range(1, row + 1)))
        count += row
    return _rows(lines)


def pattern14(n: int) -> str:
    """Each row lists letters from A, each followed by a space."""
    return _rows(
        "".join(f"{_letter(col)} " for col in range(row)) for row in range(1, n + 1)
    )


def pattern15(n: int) -> str:
    """Rows of letters from A, shrinking from ``n`` to one."""
    return _rows(
        "".join(_letter(col) for col in range(n - row)) for row in range(n)
    )


def pattern16(n: int) -> str:
    """Row ``k`` repeats the ``k``-th letter ``k`` times."""
    return _rows(_letter(row) * (row + 1) for row in range(n))


def pattern17(n: int) -> str:
    """A letter pyramid rising from A to the row's peak and back."""
    lines = []
    for row in range(n):
        padding = " " * (n - row - 1)
        letters = "".join(_letter(row - abs(row - col)) for col in range(2 * row + 1))
        lines.append(padding + letters + padding)
    return _rows(lines)


def pattern18(n: int) -> str:
    """Letters counting down from the ``n``-th letter, one more each row."""
    top = n - 1
    return _rows(
        "".join(f"{_letter(offset)} " for offset in range(top, top - row - 1, -1))
        for row in range(n)
    )


def pattern19(n: int) -> str:
    """A hollow diamond cut out of a star block."""
    top = ("*" * (n - row) + " " * (2 * row) + "*" * (n - row) for row in range(n))
    bottom = (
        "*" * (row + 1) + " " * (2 * n - 2 - 2 * row) + "*" * (row + 1)
        for row in range(n)
    )
    return _rows([*top, *bottom])


def pattern20(n: int) -> str:
    """Two star triangles meeting in the middle, then parting again."""
    top = (
        "*" * (row + 1) + " " * (2 * n - 1 - 2 * row) + "*" * (row + 1)
        for row in range(n)
    )
    bottom = ("*" * (n - row) + " " * (2 * row + 1) + "*" * (n - row) for row in range(n))
    return _rows([*top, *bottom])


def pattern21(n: int) -> str:
    """A hollow square of stars."""
    edges = {1, n}
    return _rows(
        "".join(
            "*" if row in edges or col in edges else " " for col in range(1, n + 1)
        )
        for row in range(1, n + 1)
    )


def pattern22(n: int) -> str:
    """Concentric squares of digits from ``n`` at the edge down to 1 at the centre."""
    size = 2 * n - 1
    return _rows(
        "".join(
            str(n - min(row, col, size - 1 - row, size - 1 - col)) for col in range(size)
        )
        for row in range(size)
    )