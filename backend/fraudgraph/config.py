"""
config.py – Centralised configuration via environment variables.
All tunable view settings live here so nothing is scattered across modules.
"""
import os


# ── Logging ────────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── API ────────────────────────────────────────────────────────────────────────
CORS_ORIGINS: list = os.getenv("CORS_ORIGINS", "*").split(",")

# ── Sampling ───────────────────────────────────────────────────────────────────
# Hard node budget for anything handed to the renderer. Flagged accounts and
# their direct counterparties may push the result past it.
GRAPH_NODE_BUDGET: int = int(os.getenv("GRAPH_NODE_BUDGET", "300"))

# ── Risk tiers ─────────────────────────────────────────────────────────────────
# Fixed on purpose: the table, the graph and the tooltip must agree.
RISK_HIGH_THRESHOLD: float = 70.0
RISK_MEDIUM_THRESHOLD: float = 40.0

# ── Layout (networkx spring layout) ────────────────────────────────────────────
LAYOUT_IDEAL_EDGE_LENGTH: float = float(os.getenv("LAYOUT_IDEAL_EDGE_LENGTH", "120"))
LAYOUT_ITERATIONS: int = int(os.getenv("LAYOUT_ITERATIONS", "50"))
LAYOUT_PADDING: float = float(os.getenv("LAYOUT_PADDING", "40"))
# Approximate glyph width at the node label font size, used for label-aware spacing.
LAYOUT_LABEL_CHAR_PX: float = 5.0

# ── Viewport ───────────────────────────────────────────────────────────────────
GRAPH_MIN_ZOOM: float = float(os.getenv("GRAPH_MIN_ZOOM", "0.15"))
GRAPH_MAX_ZOOM: float = float(os.getenv("GRAPH_MAX_ZOOM", "4.0"))
GRAPH_WHEEL_SENSITIVITY: float = float(os.getenv("GRAPH_WHEEL_SENSITIVITY", "0.3"))

# ── Tooltip ────────────────────────────────────────────────────────────────────
TOOLTIP_OFFSET_PX: int = int(os.getenv("TOOLTIP_OFFSET_PX", "14"))
CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "$")
