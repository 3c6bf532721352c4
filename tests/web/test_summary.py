"""Tests for the summary component helpers."""
import math

from drinklist.web.components.summary import format_total


def test_format_total():
    """Test formatting the alcohol total."""
    assert format_total(45.0, 2) == "45.00"
    assert format_total(15.65, 2) == "15.65"
    assert format_total(0.0, 0) == "0"


def test_format_total_not_a_number():
    """Test that a NaN total is shown as NaN."""
    assert format_total(math.nan, 2) == "NaN"
