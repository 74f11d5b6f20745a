"""Small numeric exercises on two or three values."""

from __future__ import annotations


def sort_descending(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Return the three values ordered from largest to smallest."""
    if x < y:
        x, y = y, x
    if y < z:
        y, z = z, y
    if x < y:
        x, y = y, x
    return x, y, z


def replace_min_with_sum(x: float, y: float, z: float) -> tuple[str, float]:
    """Name the smallest value and give the sum of the other two.

    On ties the earliest of X, Y, Z is taken as the smallest.
    """
    min_name, min_value = "X", x
    if y < min_value:
        min_name, min_value = "Y", y
    if z < min_value:
        min_name, min_value = "Z", z
    return min_name, x + y + z - min_value


def replace_max_with_difference(x: float, y: float, z: float) -> tuple[str, float]:
    """Name the largest value and give the difference of the other two.

    The difference is the earlier of the remaining values minus the later.
    On ties the earliest of X, Y, Z is taken as the largest.
    """
    max_name, max_value = "X", x
    if y > max_value:
        max_name, max_value = "Y", y
    if z > max_value:
        max_name, max_value = "Z", z
    if max_name == "X":
        return max_name, y - z
    if max_name == "Y":
        return max_name, x - z
    return max_name, x - y


def sum_if_different(a: int, b: int) -> tuple[int, int]:
    """Replace both values by their sum if they differ, else by zero."""
    if a != b:
        total = a + b
        return total, total
    return 0, 0


def max_if_different(a: int, b: int) -> tuple[int, int]:
    """Replace both values by the larger if they differ, else by zero."""
    if a != b:
        larger = a if a > b else b
        return larger, larger
    return 0, 0


def spread(a: float, b: float, c: float) -> float:
    """Return the largest of the three values minus the smallest."""
    return max(a, b, c) - min(a, b, c)


def double_if_decreasing(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Double the values if strictly decreasing, otherwise negate them."""
    if x > y > z:
        return x * 2, y * 2, z * 2
    return -x, -y, -z


def double_if_monotonic(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Double the values if strictly monotonic either way, otherwise negate them."""
    if x > y > z or x < y < z:
        return x * 2, y * 2, z * 2
    return -x, -y, -z


def order_pair(x: float, y: float) -> tuple[float, float]:
    """Return the two values as (smaller, larger)."""
    if x > y:
        return y, x
    return x, y