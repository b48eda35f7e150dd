"""Risk tier boundaries and encodings."""
import pytest
from hypothesis import given, strategies as st

from fraudgraph import risk
from fraudgraph.risk import RiskTier

_SEVERITY = {RiskTier.LOW: 0, RiskTier.MEDIUM: 1, RiskTier.HIGH: 2}


@pytest.mark.parametrize("score,expected", [
    (0, RiskTier.LOW),
    (39, RiskTier.LOW),
    (39.99, RiskTier.LOW),
    (40, RiskTier.MEDIUM),
    (69, RiskTier.MEDIUM),
    (70, RiskTier.HIGH),
    (100, RiskTier.HIGH),
])
def test_tier_boundaries(score, expected):
    assert risk.tier(score) == expected


def test_out_of_range_scores_use_same_thresholds():
    assert risk.tier(-5) == RiskTier.LOW
    assert risk.tier(250) == RiskTier.HIGH


@given(
    st.floats(min_value=-1000, max_value=1000, allow_nan=False),
    st.floats(min_value=-1000, max_value=1000, allow_nan=False),
)
def test_tier_is_monotonic(a, b):
    lo, hi = sorted((a, b))
    assert _SEVERITY[risk.tier(lo)] <= _SEVERITY[risk.tier(hi)]


def test_colors_per_tier():
    assert risk.color(85) == "#f43f5e"
    assert risk.color(55) == "#f59e0b"
    assert risk.color(12) == "#06b6d4"


def test_gradient_and_text_class_follow_tier():
    assert risk.gradient(70).startswith("linear-gradient(90deg, #f43f5e")
    assert risk.text_class(40) == "text-accent-amber"
    assert risk.text_class(0) == "text-accent-cyan"


@pytest.mark.parametrize("score,expected", [(42.5, 42.5), (0, 0.0), (-10, 0.0), (140, 100.0)])
def test_width_is_clamped_percentage(score, expected):
    assert risk.width(score) == expected
