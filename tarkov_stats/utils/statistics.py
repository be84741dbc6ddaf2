"""Statistical utility functions for safe calculations."""

from typing import Union

Number = Union[int, float]


def safe_divide(numerator: Number, denominator: Number, default: Number = 0.0) -> float:
    """
    Safely divide two numbers, returning default if denominator is zero.

    Args:
        numerator: The numerator
        denominator: The denominator
        default: Value to return if denominator is zero

    Returns:
        Result of division or default value
    """
    return numerator / denominator if denominator != 0 else float(default)


def safe_percentage(part: Number, whole: Number) -> float:
    """Percentage of ``part`` in ``whole``, 0.0 when ``whole`` is zero."""
    return safe_divide(part, whole) * 100
