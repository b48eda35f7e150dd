"""
tooltip.py – Hover tooltip markup for a single account node.
Pure functions of the node snapshot; no state.
"""
from __future__ import annotations

from html import escape

from . import risk
from .config import CURRENCY_SYMBOL
from .models import AccountNode

_SENT_COLOR = "#f59e0b"
_RECEIVED_COLOR = "#10b981"
_ID_COLOR = "#06b6d4"


def format_amount(value: float) -> str:
    """
    Currency-prefixed amount with thousands separators and at most three
    fraction digits, trailing zeros dropped: 15000 → "$15,000", 1234.5 → "$1,234.5".
    """
    text = f"{float(value):,.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return f"{CURRENCY_SYMBOL}{text}"


def format_score(score: float) -> str:
    """Shortest round-tripping text for the score; 85.0 → "85", 85.1234567 kept whole."""
    text = repr(float(score))
    return text[:-2] if text.endswith(".0") else text


def format_tooltip(node: AccountNode) -> str:
    score_color = risk.color(node.suspicion_score)
    return (
        f'<div style="margin-bottom:4px;font-weight:600;color:{_ID_COLOR}">{escape(node.id)}</div>'
        f'<div>Sent: <span style="color:{_SENT_COLOR}">{format_amount(node.total_sent)}</span></div>'
        f'<div>Received: <span style="color:{_RECEIVED_COLOR}">{format_amount(node.total_received)}</span></div>'
        f'<div>Suspicion: <span style="color:{score_color}">{format_score(node.suspicion_score)}</span></div>'
    )
