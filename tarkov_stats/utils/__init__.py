"""Utility helpers shared across features."""

from .statistics import safe_divide, safe_percentage
from .formatting import (
    format_item_id,
    format_number,
    format_playtime,
    format_skill_name,
)

__all__ = [
    "safe_divide",
    "safe_percentage",
    "format_item_id",
    "format_number",
    "format_playtime",
    "format_skill_name",
]
