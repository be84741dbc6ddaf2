"""
Tests for display helpers.
"""

import pytest

from tarkov_stats.utils.formatting import (
    format_item_id,
    format_number,
    format_playtime,
    format_skill_name,
)
from tarkov_stats.utils.statistics import safe_divide, safe_percentage


@pytest.mark.parametrize(
    "value,expected",
    [(0, "0"), (999, "999"), (1000, "1.0K"), (4500, "4.5K"), (1_234_567, "1.2M")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "seconds,expected",
    [(0, "0m"), (59, "0m"), (600, "10m"), (3600, "1h 0m"), (7260, "2h 1m")],
)
def test_format_playtime(seconds, expected):
    assert format_playtime(seconds) == expected


@pytest.mark.parametrize(
    "skill_id,expected",
    [
        ("Endurance", "Endurance"),
        ("StressResistance", "Stress Resistance"),
        ("AimDrills", "Aim Drills"),
        ("", ""),
    ],
)
def test_format_skill_name(skill_id, expected):
    assert format_skill_name(skill_id) == expected


def test_format_item_id():
    assert format_item_id("5aa7cfc0e5b5b00015693143") == "Item 15693143"
    assert format_item_id("abc") == "Item abc"


def test_safe_divide():
    assert safe_divide(10, 4) == 2.5
    assert safe_divide(10, 0) == 0.0
    assert safe_divide(10, 0, default=10) == 10


def test_safe_percentage():
    assert safe_percentage(1, 4) == 25.0
    assert safe_percentage(3, 0) == 0.0
