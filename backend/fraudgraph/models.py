"""
models.py – Pydantic request / response models.
Defines the record shapes crossing the API boundary. Numeric fields arriving
as strings are coerced here so nothing loosely typed reaches risk encoding;
NaN and infinities are rejected outright.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AccountNode(BaseModel):
    """
    One account in the transfer network. Immutable snapshot; the view never
    mutates it. Extra fields from the upstream payload are kept.
    """
    model_config = ConfigDict(frozen=True, extra="allow", allow_inf_nan=False)

    id: str
    total_sent: float
    total_received: float
    suspicion_score: float
    is_suspicious: bool


class TransferEdge(BaseModel):
    """
    Aggregated transfers from one account to another.
    Accepts ``source``/``target`` as well as ``source_id``/``target_id``.
    """
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, extra="allow", allow_inf_nan=False
    )

    source_id: str = Field(..., alias="source")
    target_id: str = Field(..., alias="target")
    amount: float
    count: int


class FraudRing(BaseModel):
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)

    ring_id: str
    member_accounts: List[str]
    pattern_type: str
    risk_score: float


class GraphViewRequest(BaseModel):
    nodes: List[AccountNode] = Field(default_factory=list)
    edges: List[TransferEdge] = Field(default_factory=list)
    budget: Optional[int] = Field(None, ge=0)


class RingTableRequest(BaseModel):
    rings: List[FraudRing] = Field(default_factory=list)


class TooltipResponse(BaseModel):
    markup: str
    tier: str


class SamplingSummary(BaseModel):
    total_nodes: int
    total_edges: int
    displayed_nodes: int
    displayed_edges: int
    flagged_nodes: int
    neighbor_nodes: int
    fill_nodes: int
    budget: int
    sampled: bool
    over_budget: bool
    processing_time_seconds: Optional[float] = None
    network_statistics: Optional[Dict[str, Any]] = None


class GraphViewResponse(BaseModel):
    graph: Dict[str, List[Dict[str, Any]]]
    style: List[Dict[str, Any]]
    layout: Dict[str, Any]
    zoom: Dict[str, float]
    summary: SamplingSummary
    tooltip: Optional[Dict[str, Any]] = None
