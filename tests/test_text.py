import pytest

from dentalai.utils.text import percent, to_fixed


@pytest.mark.parametrize(
    "value, text",
    [(6.25, "6.3"), (-2.25, "-2.3"), (0.05, "0.1"), (8.24, "8.2"), (0.0, "0.0"), (90.0, "90.0")],
)
def test_to_fixed(value, text):
    assert to_fixed(value) == text


def test_to_fixed_digits():
    assert to_fixed(1.005, 2) == "1.00"
    assert to_fixed(2.5, 0) == "3"


@pytest.mark.parametrize("value, pct", [(0.8, 80), (0.625, 63), (0.95, 95), (0.0, 0)])
def test_percent(value, pct):
    assert percent(value) == pct
