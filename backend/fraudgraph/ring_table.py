"""
ring_table.py – Rows for the fraud-ring listing.
Presentation only; the score bar reuses the risk tiering of the graph view.
"""
from __future__ import annotations

from typing import Any, Dict, List, Sequence

from . import risk
from .models import FraudRing

EMPTY_MESSAGE = "No fraud rings detected."

COLUMNS = ["Ring ID", "Pattern Type", "Member Count", "Risk Score", "Member Accounts"]


def ring_row(ring: FraudRing) -> Dict[str, Any]:
    return {
        "ring_id":         ring.ring_id,
        "pattern_type":    ring.pattern_type,
        "member_count":    len(ring.member_accounts),
        "risk_score":      ring.risk_score,
        "risk_tier":       risk.tier(ring.risk_score).value,
        "bar_width":       risk.width(ring.risk_score),
        "bar_gradient":    risk.gradient(ring.risk_score),
        "score_class":     risk.text_class(ring.risk_score),
        "member_accounts": ", ".join(ring.member_accounts),
    }


def build_ring_table(rings: Sequence[FraudRing]) -> Dict[str, Any]:
    """Table payload in input order, or the empty-state message when there are no rings."""
    if not rings:
        return {"empty": True, "message": EMPTY_MESSAGE, "columns": COLUMNS, "rows": []}
    rows: List[Dict[str, Any]] = [ring_row(r) for r in rings]
    return {"empty": False, "message": None, "columns": COLUMNS, "rows": rows}
