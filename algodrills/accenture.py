"""Assessment drills: binary expressions, sums, spirals and casing."""

from __future__ import annotations

from collections.abc import Sequence

_CAKE_MODULUS = 1000000007
_SUPERIOR_FLOOR = -128


def operations_binary_string(expression: str | None) -> int:
    """Evaluate a left-to-right binary expression such as ``1C0A1B1``.

    'A' is AND, 'B' is OR and any other operator is XOR.
    """
    if not expression or len(expression) % 2 == 0:
        raise ValueError("expression must alternate operands and operators")
    operands = expression[0::2]
    if any(char not in "01" for char in operands):
        raise ValueError("operands must be binary digits")
    result = int(operands[0])
    for operator, operand in zip(expression[1::2], operands[1:]):
        bit = int(operand)
        if operator == "A":
            result &= bit
        elif operator == "B":
            result |= bit
        else:
            result ^= bit
    return result


def difference_of_sums(divisor: int, limit: int) -> int:
    """Sum of 1..limit not divisible by ``divisor`` minus the sum of those that are."""
    divisible = sum(value for value in range(1, limit + 1) if value % divisor == 0)
    rest = sum(value for value in range(1, limit + 1) if value % divisor != 0)
    return rest - divisible


def large_small_sum(values: Sequence[int]) -> int:
    """Second smallest odd-indexed value plus second largest even-indexed value.

    Returns 0 for fewer than four values.
    """
    if len(values) < 4:
        return 0
    even_positions = sorted(values[0::2], reverse=True)
    odd_positions = sorted(values[1::2])
    return odd_positions[1] + even_positions[1]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    spiral: list[int] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        spiral.extend(matrix[top][left : right + 1])
        top += 1
        spiral.extend(row[right] for row in matrix[top : bottom + 1])
        right -= 1
        if top <= bottom:
            spiral.extend(reversed(matrix[bottom][left : right + 1]))
            bottom -= 1
        if left <= right:
            spiral.extend(row[left] for row in reversed(matrix[top : bottom + 1]))
            left += 1
    return spiral


def count_case(text: str) -> tuple[int, int]:
    """Return the number of lowercase and uppercase ASCII letters."""
    lower = sum(1 for char in text if "a" <= char <= "z")
    upper = sum(1 for char in text if "A" <= char <= "Z")
    return lower, upper


def _ascii_map(text: str, convert) -> str:
    return "".join(convert(char) if char.isascii() else char for char in text)


def correct_format(text: str) -> str:
    """Convert ``text`` to whichever case its letters mostly use; ties are left alone."""
    lower, upper = count_case(text)
    if lower > upper:
        return _ascii_map(text, str.lower)
    if upper > lower:
        return _ascii_map(text, str.upper)
    return text


def cake_pieces(cuts: int) -> int:
    """Maximum pieces a cake yields with ``cuts`` straight cuts, modulo 1000000007."""
    return (cuts * (cuts + 1) // 2 + 1) % _CAKE_MODULUS


def count_superiors(values: Sequence[int]) -> int:
    """Count elements greater than everything to their right."""
    count = 0
    highest = _SUPERIOR_FLOOR
    for value in reversed(values):
        if value > highest:
            highest = value
            count += 1
    return count