"""
risk.py – Map a 0-100 score onto a display tier and its visual encoding.

Tiers
-----
score >= 70  → high    (rose)
score >= 40  → medium  (amber)
otherwise    → low     (cyan)

Shared by the graph, the tooltip and the fraud-ring table so a score is
always drawn the same way. Scores outside 0-100 are not rejected; they go
through the same comparisons.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple

from .config import RISK_HIGH_THRESHOLD, RISK_MEDIUM_THRESHOLD


class RiskTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TierStyle(NamedTuple):
    color: str
    gradient: str
    text_class: str


TIER_STYLES: Dict[RiskTier, TierStyle] = {
    RiskTier.HIGH: TierStyle(
        "#f43f5e", "linear-gradient(90deg, #f43f5e, #e11d48)", "text-accent-rose"
    ),
    RiskTier.MEDIUM: TierStyle(
        "#f59e0b", "linear-gradient(90deg, #f59e0b, #d97706)", "text-accent-amber"
    ),
    RiskTier.LOW: TierStyle(
        "#06b6d4", "linear-gradient(90deg, #06b6d4, #0891b2)", "text-accent-cyan"
    ),
}


def tier(score: float) -> RiskTier:
    if score >= RISK_HIGH_THRESHOLD:
        return RiskTier.HIGH
    if score >= RISK_MEDIUM_THRESHOLD:
        return RiskTier.MEDIUM
    return RiskTier.LOW


def color(score: float) -> str:
    """Solid colour for the score's tier (tooltip text, flagged node fill)."""
    return TIER_STYLES[tier(score)].color


def gradient(score: float) -> str:
    """Two-stop CSS gradient for the table's score bar."""
    return TIER_STYLES[tier(score)].gradient


def text_class(score: float) -> str:
    return TIER_STYLES[tier(score)].text_class


def width(score: float) -> float:
    """
    Score bar width as a percentage of its track.
    Clamped to 0-100 so an out-of-range score never overflows the track.
    """
    return min(max(float(score), 0.0), 100.0)
