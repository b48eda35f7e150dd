"""
main.py – FastAPI application entry point.

Endpoints
---------
GET  /                   – root status
GET  /health             – liveness / readiness probe with version info
POST /graph/view         – sample, lay out and style an account graph
POST /graph/tooltip      – tooltip markup for one account node
POST /fraud-rings/table  – fraud-ring table rows with risk encoding

Each /graph/view request gets its own controller and display region, which
are unmounted before the response is returned.
"""
from __future__ import annotations

import logging
import time
import uuid

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import risk
from .config import CORS_ORIGINS, GRAPH_NODE_BUDGET, LOG_LEVEL
from .formatter import format_view
from .models import AccountNode, GraphViewRequest, RingTableRequest, TooltipResponse
from .ring_table import build_ring_table
from .surface import DisplayRegion
from .tooltip import format_tooltip
from .view import GraphViewController

__version__ = "1.0.0"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)-8s %(name)s │ %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("Fraud Graph View v%s starting up (node budget %d)", __version__, GRAPH_NODE_BUDGET)
    yield
    log.info("Fraud Graph View shutting down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Fraud Graph View",
    description="Budgeted, risk-preserving account graph views for fraud analysts",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Request-ID middleware
# ---------------------------------------------------------------------------
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@app.get("/", include_in_schema=False)
def root():
    return {"status": "ok", "service": "Fraud Graph View", "version": __version__}


@app.get("/health")
def health():
    """Liveness / readiness probe."""
    return {
        "status": "healthy",
        "version": __version__,
        "node_budget": GRAPH_NODE_BUDGET,
    }


@app.post("/graph/view")
def graph_view(payload: GraphViewRequest):
    """
    Reduce the supplied graph to the node budget (flagged accounts and their
    counterparties always kept), compute positions and return a paintable view.
    """
    budget = GRAPH_NODE_BUDGET if payload.budget is None else payload.budget
    start_time = time.perf_counter()

    controller = GraphViewController(DisplayRegion(), budget=budget)
    try:
        controller.update(payload.nodes, payload.edges)
        result = format_view(
            controller, payload.nodes, payload.edges, time.perf_counter() - start_time
        )
    finally:
        controller.unmount()

    return result


@app.post("/graph/tooltip", response_model=TooltipResponse)
def graph_tooltip(node: AccountNode):
    return TooltipResponse(
        markup=format_tooltip(node),
        tier=risk.tier(node.suspicion_score).value,
    )


@app.post("/fraud-rings/table")
def fraud_ring_table(payload: RingTableRequest):
    table = build_ring_table(payload.rings)
    log.info("Fraud-ring table: %d rows", len(table["rows"]))
    return table
