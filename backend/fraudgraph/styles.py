"""
styles.py – Visual encoding rules handed to the renderer.

Rules are (selector, style) pairs applied in order, later rules overriding
earlier ones. Flagged accounts get a larger, high-tier node so they dominate
the view regardless of density.
"""
from __future__ import annotations

from typing import Any, Dict, List

from .risk import RiskTier, TIER_STYLES

_HIGH = TIER_STYLES[RiskTier.HIGH].color
_ACTIVE = TIER_STYLES[RiskTier.LOW].color

NODE_SIZE = 22
FLAGGED_NODE_SIZE = 34


def graph_stylesheet() -> List[Dict[str, Any]]:
    return [
        {
            "selector": "node",
            "style": {
                "label": "data(id)",
                "background-color": "#3b82f6",
                "color": "#94a3b8",
                "font-size": "8px",
                "text-valign": "bottom",
                "text-margin-y": 6,
                "width": NODE_SIZE,
                "height": NODE_SIZE,
                "border-width": 1.5,
                "border-color": "#1e3a5f",
                "text-outline-width": 2,
                "text-outline-color": "#0a0e1a",
            },
        },
        {
            "selector": "node[?is_suspicious]",
            "style": {
                "background-color": _HIGH,
                "border-color": "#9f1239",
                "border-width": 2.5,
                "width": FLAGGED_NODE_SIZE,
                "height": FLAGGED_NODE_SIZE,
                "color": "#fda4af",
                "font-size": "10px",
                "font-weight": "bold",
            },
        },
        {
            "selector": "edge",
            "style": {
                "width": 1.2,
                "line-color": "#334155",
                "target-arrow-color": "#475569",
                "target-arrow-shape": "triangle",
                "curve-style": "bezier",
                "opacity": 0.6,
                "arrow-scale": 0.8,
            },
        },
        {
            "selector": "edge:active, edge:selected",
            "style": {
                "line-color": _ACTIVE,
                "target-arrow-color": _ACTIVE,
                "opacity": 1,
                "width": 2,
            },
        },
        {
            "selector": "node:active, node:selected",
            "style": {
                "border-color": _ACTIVE,
                "border-width": 3,
                "overlay-color": _ACTIVE,
                "overlay-opacity": 0.1,
            },
        },
    ]


def tooltip_style() -> Dict[str, Any]:
    """Inline style of the hover overlay; positioned in viewport pixels."""
    return {
        "position": "fixed",
        "pointer-events": "none",
        "z-index": 50,
        "padding": "8px 12px",
        "border-radius": "8px",
        "font-size": "12px",
        "font-family": "monospace",
        "background": "rgba(15, 23, 42, 0.95)",
        "border": "1px solid rgba(6, 182, 212, 0.3)",
        "color": "#e2e8f0",
        "backdrop-filter": "blur(8px)",
        "max-width": "240px",
    }
